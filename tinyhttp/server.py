"""A minimal TCP server answering every connection with an empty 200 response."""

from __future__ import annotations

import logging
import socket
import threading
from types import TracebackType
from typing import Optional

from tinyhttp.headers import get_default_headers
from tinyhttp.response import StatusCode, write_headers, write_status_line

logger = logging.getLogger(__name__)

_ACCEPT_POLL_SECONDS = 0.1


class Server:
    """Accepts connections on a listening socket in a background thread."""

    def __init__(self, listener: socket.socket) -> None:
        self._listener = listener
        self._listener.settimeout(_ACCEPT_POLL_SECONDS)
        self._closed = threading.Event()
        self._thread = threading.Thread(target=self._listen, daemon=True)
        self._thread.start()

    @property
    def port(self) -> int:
        """The port the server is listening on."""
        return self._listener.getsockname()[1]

    def close(self) -> None:
        """Stop accepting connections and release the listening socket."""
        self._closed.set()
        if self._thread is not threading.current_thread():
            self._thread.join()
        self._listener.close()

    def __enter__(self) -> Server:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def _listen(self) -> None:
        while not self._closed.is_set():
            try:
                conn, _ = self._listener.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                if self._closed.is_set():
                    return
                logger.error("Error accepting connection: %s", exc)
                continue
            threading.Thread(target=self._handle, args=(conn,), daemon=True).start()

    def _handle(self, conn: socket.socket) -> None:
        with conn:
            conn.settimeout(None)
            try:
                with conn.makefile("wb") as out:
                    write_status_line(out, StatusCode.OK)
                    write_headers(out, get_default_headers(0))
            except OSError as exc:
                logger.warning("Error writing response: %s", exc)


def serve(port: int) -> Server:
    """Listen on ``port`` on all interfaces and start serving in the background."""
    listener = socket.create_server(("", port))
    return Server(listener)