"""Command that runs the HTTP server until it receives SIGINT or SIGTERM."""

from __future__ import annotations

import argparse
import logging
import signal
import threading
from typing import Optional, Sequence

from tinyhttp.server import serve

logger = logging.getLogger(__name__)

PORT = 42069
_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve until interrupted; return the process exit status."""
    parser = argparse.ArgumentParser(prog="httpserver", description="Run the HTTP server.")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        server = serve(args.port)
    except OSError as exc:
        logger.error("Error starting server: %s", exc)
        return 1

    stop = threading.Event()

    def _on_signal(signum, frame):
        stop.set()

    previous = {sig: signal.signal(sig, _on_signal) for sig in _STOP_SIGNALS}
    try:
        with server:
            logger.info("Server started on port %d", server.port)
            while not stop.wait(0.5):
                pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
    logger.info("Server gracefully stopped")
    return 0