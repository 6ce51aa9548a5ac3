import os
import re
import json
import logging

logger = logging.getLogger(__name__)

# wikipedia citation markers: [3], [a], [note 1], [citation needed], [who?] ...
WIKIPEDIA_CITATION_PATTERN = (
    r"\[(?:\d+|[a-z]|note \d+|nb \d+|citation needed|clarification needed"
    r"|dubious[^\]]*|according to whom\?|by whom\?|who\?|when\?|which\?|where\?)\]"
)

DEFAULT_SETTINGS = {
    "cursor_color": "red",
    "sound": "beep",
    "interval_seconds": 2,
    "timeout_minutes": 5,
    "trim_leading_whitespace": True,
    "remove_pattern": WIKIPEDIA_CITATION_PATTERN,
    "trailing_newlines": 2,
    "disabled_plugins": [],
}


def default_settings():
    settings = DEFAULT_SETTINGS.copy()
    settings["disabled_plugins"] = []
    return settings


class SettingsManager:
    @staticmethod
    def load_settings(settings_path):
        if not os.path.exists(settings_path):
            return default_settings()
        try:
            with open(settings_path, 'r') as f:
                settings = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("could not parse %s, using default settings", settings_path)
            return default_settings()
        if not isinstance(settings, dict):
            logger.warning("%s does not hold a settings object, using defaults", settings_path)
            return default_settings()
        # fill in options added since the file was written
        for key, value in default_settings().items():
            settings.setdefault(key, value)
        try:
            re.compile(settings["remove_pattern"] or "")
        except (re.error, TypeError) as e:
            logger.warning("invalid remove_pattern in %s (%s), using the default", settings_path, e)
            settings["remove_pattern"] = WIKIPEDIA_CITATION_PATTERN
        return settings

    @staticmethod
    def save_settings(settings, settings_path):
        with open(settings_path, 'w') as f:
            json.dump(settings, f, indent=4)
