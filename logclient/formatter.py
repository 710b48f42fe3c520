"""Render log entries into single text lines using a placeholder template."""

from datetime import datetime

from logclient.models import LEVEL_TOKEN, MESSAGE_TOKEN, TIMESTAMP_TOKEN, LogLevel


def format_timestamp(now: datetime) -> str:
    """Render as 'YYYY-MM-DD hh:mm:ss AM' on a 12-hour clock.

    The AM/PM suffix is computed rather than taken from %p, which follows the
    process locale.
    """
    suffix = "AM" if now.hour < 12 else "PM"
    return f"{now.strftime('%Y-%m-%d %I:%M:%S')} {suffix}"


def format_entry(template: str, level: LogLevel, message: str, now: datetime) -> str:
    """Substitute every placeholder in template and return the line.

    Replacement runs level, then timestamp, then message, each a single
    literal pass. Tokens inside the message text are left as typed.
    """
    return (
        template
        .replace(LEVEL_TOKEN, level.label)
        .replace(TIMESTAMP_TOKEN, format_timestamp(now))
        .replace(MESSAGE_TOKEN, message)
    )
