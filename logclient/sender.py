"""Write formatted log lines to an open text stream."""

import logging
from datetime import datetime
from typing import Callable, TextIO

from logclient.formatter import format_entry
from logclient.models import LogEntry, LogLevel

logger = logging.getLogger(__name__)


def send(stream: TextIO, line: str):
    """Write one line plus a newline terminator, then flush."""
    stream.write(line + "\n")
    stream.flush()


class LogSender:
    """Formats entries with the current time and sends them on one stream."""

    def __init__(self, stream: TextIO, clock: Callable[[], datetime] = datetime.now):
        self._stream = stream
        self._clock = clock
        self._sent = 0

    @property
    def sent(self) -> int:
        return self._sent

    def log(self, level: LogLevel, message: str, template: str) -> str:
        """Format and send a single entry. Returns the line that was written."""
        line = format_entry(template, level, message, self._clock())
        send(self._stream, line)
        self._sent += 1
        logger.debug("Sent: %s", line)
        return line

    def log_entry(self, entry: LogEntry, template: str) -> str:
        return self.log(entry.level, entry.message, template)
