"""Log levels, entries, and the preset format templates."""

from dataclasses import dataclass
from enum import IntEnum

TIMESTAMP_TOKEN = "{timestamp}"
LEVEL_TOKEN = "{level}"
MESSAGE_TOKEN = "{message}"
PLACEHOLDERS = (TIMESTAMP_TOKEN, LEVEL_TOKEN, MESSAGE_TOKEN)

DEFAULT_TEMPLATE = "[{timestamp}] [{level}]: {message}"
PRESET_TEMPLATES = (
    DEFAULT_TEMPLATE,
    "[{level}] {timestamp}: {message}",
    "{message}: [{level}] {timestamp}",
)


class LogLevel(IntEnum):
    INFO = 0
    ERROR = 1
    WARNING = 2
    DEBUG = 3
    CUSTOM = 4
    FATAL = 5

    @property
    def label(self) -> str:
        """Canonical name written on the wire, e.g. 'Warning'."""
        return self.name.capitalize()


_LEVELS_BY_LABEL = {level.label: level for level in LogLevel}


def parse_level(token: str) -> LogLevel | None:
    """Resolve a level from its name or menu ordinal. Returns None if unknown.

    Names must match the menu label exactly ('Info', not 'info'); ordinals must
    be one of the values shown in the level menu.
    """
    stripped = token.strip()
    if not stripped:
        return None
    if stripped.isdecimal():
        try:
            return LogLevel(int(stripped))
        except ValueError:
            return None
    return _LEVELS_BY_LABEL.get(stripped)


@dataclass(frozen=True)
class LogEntry:
    level: LogLevel
    message: str


AUTO_ENTRIES = (
    LogEntry(LogLevel.INFO, "Client connected to the server"),
    LogEntry(LogLevel.INFO, "Auto log messages: All log messages printed at once"),
    LogEntry(LogLevel.ERROR, "Database connection failed."),
    LogEntry(LogLevel.WARNING, "Low disk space. Consider freeing up space."),
    LogEntry(LogLevel.DEBUG, "Debugging information: Session ID - 696969"),
)

DISCONNECT_ENTRY = LogEntry(LogLevel.INFO, "Client disconnected from the server")


def has_placeholder(template: str) -> bool:
    """Return True if the template contains at least one placeholder token."""
    return any(token in template for token in PLACEHOLDERS)
