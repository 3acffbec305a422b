"""Command that prints every HTTP request it receives over TCP."""

from __future__ import annotations

import argparse
import logging
import socket
from typing import Optional, Sequence

from tinyhttp.request import Request, request_from_reader

logger = logging.getLogger(__name__)

PORT = 42069


def format_request(req: Request) -> str:
    """Render a parsed request as a human-readable report."""
    lines = [
        "Request line:",
        f"- Method: {req.request_line.method}",
        f"- Target: {req.request_line.request_target}",
        f"- Version: {req.request_line.http_version}",
        "Headers:",
    ]
    lines.extend(f"- {key}: {value}" for key, value in req.headers.items())
    lines.append("Body:")
    lines.append(req.body.as_string())
    return "\n".join(lines) + "\n"


def _handle_connection(conn: socket.socket, address) -> None:
    remote = f"{address[0]}:{address[1]}"
    with conn:
        logger.info("New connection accepted. Remote address: %s", remote)
        try:
            with conn.makefile("rb", buffering=0) as reader:
                req = request_from_reader(reader)
        except (ValueError, OSError) as exc:
            logger.error("Request error: %s", exc)
        else:
            print(format_request(req), end="", flush=True)
    logger.info("Connection %s closed", remote)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Accept connections and print their requests until interrupted."""
    parser = argparse.ArgumentParser(
        prog="tcplistener", description="Print HTTP requests received over TCP."
    )
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        listener = socket.create_server(("", args.port))
    except OSError as exc:
        logger.error("Could not set up listener: %s", exc)
        return 1

    with listener:
        try:
            while True:
                try:
                    conn, address = listener.accept()
                except OSError as exc:
                    logger.error("Error accepting connection: %s", exc)
                    continue
                _handle_connection(conn, address)
        except KeyboardInterrupt:
            return 0