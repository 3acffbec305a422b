"""Command that sends each line typed on standard input as a UDP datagram."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from collections.abc import Iterable, Iterator
from typing import Optional, Sequence, TextIO, Union

logger = logging.getLogger(__name__)

HOST = "localhost"
PORT = 42069
_PROMPT = ">"


def send_lines(
    lines: Iterable[Union[str, bytes]], host: str = HOST, port: int = PORT
) -> int:
    """Send every line as one datagram to ``host:port``; return how many were sent.

    Address resolution and socket set-up failures raise ``OSError``; a
    failure to send one line is logged and the next line is tried.
    """
    family, sock_type, proto, _, address = socket.getaddrinfo(
        host, port, type=socket.SOCK_DGRAM
    )[0]
    sent = 0
    with socket.socket(family, sock_type, proto) as sock:
        sock.connect(address)
        for line in lines:
            payload = line.encode() if isinstance(line, str) else bytes(line)
            try:
                sock.send(payload)
            except OSError as exc:
                logger.error("Error writing to udp conn: %s", exc)
                continue
            sent += 1
    return sent


def _prompted_lines(stream: TextIO, prompt: str = _PROMPT) -> Iterator[str]:
    while True:
        print(prompt, end="", flush=True)
        line = stream.readline()
        if not line:
            return
        yield line


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read lines from standard input and send them until end of input."""
    parser = argparse.ArgumentParser(
        prog="udpsender", description="Send lines from standard input over UDP."
    )
    parser.add_argument("--host", default=HOST, help="destination host")
    parser.add_argument("--port", type=int, default=PORT, help="destination port")
    args = parser.parse_args(argv)

    try:
        send_lines(_prompted_lines(sys.stdin), args.host, args.port)
    except OSError as exc:
        logger.error("Could not set up udp connection: %s", exc)
        return 1
    return 0