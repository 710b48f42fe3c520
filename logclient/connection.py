"""TCP connection to the logging service, exposed as a UTF-8 text writer."""

import logging
import socket
from typing import TextIO

logger = logging.getLogger(__name__)


class LogConnection:
    """A single TCP connection to the log server. No reconnect.

    Use as a context manager so the socket is released on every exit path:

        with LogConnection(host, port) as conn:
            send(conn.writer, "line")
    """

    def __init__(self, host: str, port: int, timeout: float = 5.0):
        self._host = host
        self._port = port
        self._timeout = timeout
        self._sock: socket.socket | None = None
        self._writer: TextIO | None = None

    @property
    def connected(self) -> bool:
        return self._sock is not None

    @property
    def address(self) -> tuple[str, int]:
        return self._host, self._port

    @property
    def writer(self) -> TextIO:
        """Line-oriented text stream over the socket."""
        if self._writer is None:
            raise ConnectionError("Not connected")
        return self._writer

    def open(self):
        """Establish the TCP connection. Raises OSError on failure."""
        try:
            sock = socket.create_connection((self._host, self._port), timeout=self._timeout)
        except OSError as e:
            logger.info("Failed to connect to %s:%d: %s", self._host, self._port, e)
            raise
        self._sock = sock
        self._writer = sock.makefile("w", encoding="utf-8", newline="\n")
        logger.info("Connected to %s:%d", self._host, self._port)

    def close(self):
        """Close the writer and the socket. Safe to call more than once."""
        if self._sock is None:
            return
        try:
            self._writer.close()
        except OSError as e:
            logger.debug("Writer close failed: %s", e)
        try:
            self._sock.close()
        except OSError:
            pass
        self._sock = None
        self._writer = None
        logger.info("Connection to %s:%d closed", self._host, self._port)

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
