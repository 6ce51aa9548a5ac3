import os

# no display is needed for the Qt tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from clipboard_watcher import ClipboardWatcher


class FakeClipboard:
    def __init__(self, text=None):
        self.value = text

    def text(self):
        return self.value


class FakeSink:
    def __init__(self):
        self.inserted = []

    def insert_at_cursor(self, text):
        self.inserted.append(text)

    @property
    def document(self):
        return "".join(self.inserted)


class FakeFeedback:
    def __init__(self):
        self.cues = []
        self.messages = []

    def play_cue(self, cue):
        self.cues.append(cue)

    def show_message(self, message):
        self.messages.append(message)


class FakeScheduler:
    def __init__(self):
        self.active = []
        self.cancelled = []

    def schedule_repeating(self, seconds, callback):
        handle = (seconds, callback)
        self.active.append(handle)
        return handle

    def cancel(self, handle):
        if handle is None:
            return
        self.active.remove(handle)
        self.cancelled.append(handle)


class FakeBindings:
    def describe_bindings_for(self, action):
        return {"toggle": "Ctrl+Alt+V"}.get(action, "")


class FakeCursor:
    def __init__(self, color="black"):
        self.color = color
        self.history = []

    def cursor_color(self):
        return self.color

    def set_cursor_color(self, color):
        self.history.append(color)
        self.color = color


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def sink():
    return FakeSink()


@pytest.fixture
def feedback():
    return FakeFeedback()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def cursor():
    return FakeCursor()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_watcher(clipboard, sink, feedback, scheduler, cursor, clock):
    def make(settings=None, plugin_manager=None):
        return ClipboardWatcher(
            clipboard,
            sink=sink,
            feedback=feedback,
            scheduler=scheduler,
            settings=settings,
            bindings=FakeBindings(),
            cursor=cursor,
            plugin_manager=plugin_manager,
            clock=clock,
        )
    return make
