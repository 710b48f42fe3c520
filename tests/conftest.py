"""Shared fixtures: an in-process TCP server that records received lines."""

import socket
import threading
import time

import pytest


class CaptureServer:
    """Accepts connections and stores every newline-terminated line it reads."""

    def __init__(self):
        self._shutdown = threading.Event()
        self._lock = threading.Lock()
        self._lines: list[str] = []
        self.connections = 0
        self.peer_closed = threading.Event()

        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._sock.settimeout(0.2)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(5)
        self.host, self.port = self._sock.getsockname()

    @property
    def lines(self) -> list[str]:
        with self._lock:
            return list(self._lines)

    def start(self):
        threading.Thread(target=self._accept_loop, daemon=True).start()
        return self

    def stop(self):
        self._shutdown.set()

    def wait_for_lines(self, count: int, timeout: float = 3.0) -> list[str]:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            lines = self.lines
            if len(lines) >= count:
                return lines
            time.sleep(0.02)
        return self.lines

    def _accept_loop(self):
        while not self._shutdown.is_set():
            try:
                conn, _ = self._sock.accept()
            except socket.timeout:
                continue
            except OSError:
                break
            with self._lock:
                self.connections += 1
            threading.Thread(target=self._handle, args=(conn,), daemon=True).start()
        self._sock.close()

    def _handle(self, conn: socket.socket):
        conn.settimeout(0.2)
        buf = b""
        with conn:
            while not self._shutdown.is_set():
                try:
                    data = conn.recv(4096)
                except socket.timeout:
                    continue
                except OSError:
                    break
                if not data:
                    self.peer_closed.set()
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    with self._lock:
                        self._lines.append(line.decode("utf-8"))


@pytest.fixture
def capture_server():
    server = CaptureServer().start()
    try:
        yield server
    finally:
        server.stop()


@pytest.fixture
def unused_port():
    """A local port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
