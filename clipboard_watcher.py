import logging
import re
import time

from settings import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

TOGGLE_ACTION = "toggle"


def compile_pattern(pattern):
    # empty or missing pattern means nothing is removed
    if not pattern:
        return None
    return re.compile(pattern)


def clean_text(text, trim_leading_whitespace=True, remove_pattern=None):
    """Return the copy of clipboard text that gets inserted.

    Leading spaces and tabs are dropped first, then every match of
    remove_pattern (a compiled pattern or None).
    """
    if trim_leading_whitespace:
        text = text.lstrip(" \t")
    if remove_pattern is not None:
        text = remove_pattern.sub("", text)
    return text


class ClipboardWatcher:
    """Polls the clipboard and pastes new text at the editor cursor.

    All host services are passed in: clipboard (text()), sink
    (insert_at_cursor()), feedback (play_cue(), show_message()), bindings
    (describe_bindings_for()), cursor (cursor_color(), set_cursor_color())
    and scheduler (schedule_repeating(), cancel()).
    """

    def __init__(self, clipboard, sink, feedback, scheduler, settings=None,
                 bindings=None, cursor=None, plugin_manager=None, clock=time.monotonic):
        self.clipboard = clipboard
        self.sink = sink
        self.feedback = feedback
        self.scheduler = scheduler
        self.bindings = bindings
        self.cursor = cursor
        self.plugin_manager = plugin_manager
        self.clock = clock

        self.timer = None
        self.last_seen_clipboard = None
        self.idle_clock_start = None
        # the pre-start color may itself be None (the host default)
        self.saved_cursor_color = None
        self.cursor_color_saved = False
        self.apply_settings(settings or {})

    def apply_settings(self, settings):
        def option(key):
            return settings.get(key, DEFAULT_SETTINGS[key])

        # compile first so a bad pattern leaves the old options untouched
        remove_pattern = compile_pattern(option("remove_pattern"))
        self.remove_pattern = remove_pattern
        self.cursor_color_option = option("cursor_color")
        self.sound = option("sound")
        self.interval_seconds = option("interval_seconds")
        self.timeout_minutes = option("timeout_minutes")
        self.trim_leading_whitespace = option("trim_leading_whitespace")
        self.trailing_newlines = option("trailing_newlines")

    @property
    def running(self):
        return self.timer is not None

    def binding_hint(self):
        if self.bindings is None:
            return "no key binding"
        keys = self.bindings.describe_bindings_for(TOGGLE_ACTION)
        return keys or "no key binding"

    def toggle(self):
        if self.running:
            self.stop()
        else:
            self.start()

    def start(self):
        if self.running:
            self.feedback.show_message(
                f"Auto-paste is already running (toggle with {self.binding_hint()})")
            return

        self.last_seen_clipboard = self.clipboard.text()
        self.idle_clock_start = self.clock()
        self.timer = self.scheduler.schedule_repeating(self.interval_seconds, self.tick)

        if self.cursor is not None and self.cursor_color_option:
            self.saved_cursor_color = self.cursor.cursor_color()
            self.cursor_color_saved = True
            self.cursor.set_cursor_color(self.cursor_color_option)

        logger.info("auto-paste started, polling every %ss", self.interval_seconds)
        self.feedback.show_message(
            f"Auto-paste started (toggle with {self.binding_hint()})")
        self.play_cue()

    def stop(self):
        if not self.running:
            self.feedback.show_message("Auto-paste is not running")
            return

        self.scheduler.cancel(self.timer)
        self.timer = None

        if self.cursor_color_saved:
            self.cursor.set_cursor_color(self.saved_cursor_color)
            self.saved_cursor_color = None
            self.cursor_color_saved = False

        logger.info("auto-paste stopped")
        self.feedback.show_message("Auto-paste stopped")
        self.play_cue()

    def tick(self):
        # a timer event queued before stop() must not act
        if not self.running:
            return

        text = self.clipboard.text()
        if text and text != self.last_seen_clipboard:
            self.paste(text)
            return

        if self.timeout_minutes:
            elapsed = self.clock() - self.idle_clock_start
            if elapsed > self.timeout_minutes * 60:
                logger.info("no clipboard change for %.0fs, stopping", elapsed)
                self.stop()
                self.feedback.show_message(
                    f"Auto-paste switched off after {self.timeout_minutes} "
                    "minutes without clipboard changes")

    def paste(self, text):
        cleaned = clean_text(text, self.trim_leading_whitespace, self.remove_pattern)
        if self.plugin_manager is not None:
            cleaned = self.plugin_manager.apply(cleaned)

        self.sink.insert_at_cursor(cleaned)
        if self.trailing_newlines:
            self.sink.insert_at_cursor("\n" * self.trailing_newlines)
        # remember the raw text only once it is in the document
        self.last_seen_clipboard = text
        logger.debug("pasted %d characters", len(cleaned))

        self.play_cue()
        self.idle_clock_start = self.clock()

    def play_cue(self):
        if self.sound:
            self.feedback.play_cue(self.sound)
