"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Trace levels, ordered: DEBUG < INFO < WARNING < ERROR.

    Lower value = more verbose (the panel shows more entries).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """Convert a level name to a level. Returns DEBUG if invalid."""
        try:
            return cls[level_str.upper()]
        except KeyError:
            return cls.DEBUG


# Trace panel
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_BACKLOG_SIZE = 500  # Entries replayed into panels of newly opened screens
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating a trace entry

# Chat display
THINKING_PLACEHOLDER = "Thinking..."
USER_LABEL = "You"
AI_LABEL = "Assistant"

# Code block highlighting per theme
CODE_THEME_DARK = "monokai"
CODE_THEME_LIGHT = "default"

APP_TITLE = "Tax Compliance Assistant"
APP_VERSION_LABEL = "Tax Compliance Assistant (terminal edition)"
