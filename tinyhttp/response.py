"""Writing HTTP/1.1 response status lines and headers."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import BinaryIO

HTTP_VERSION = "HTTP/1.1"
_CRLF = "\r\n"


class StatusCode(enum.IntEnum):
    """Response status codes the server knows a reason phrase for."""

    OK = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500

    def text(self) -> str:
        """Return the reason phrase for this status code."""
        return _STATUS_TEXT[self]


_STATUS_TEXT = {
    StatusCode.OK: "OK",
    StatusCode.BAD_REQUEST: "Bad Request",
    StatusCode.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


def write_status_line(w: BinaryIO, status_code: int) -> None:
    """Write the status line; unknown codes get an empty reason phrase."""
    try:
        text = StatusCode(status_code).text()
    except ValueError:
        text = ""
    w.write(f"{HTTP_VERSION} {int(status_code)} {text}{_CRLF}".encode())


def write_headers(w: BinaryIO, headers: Mapping[str, str]) -> None:
    """Write each header line followed by the blank line ending the section."""
    for key, value in headers.items():
        w.write(f"{key}: {value}{_CRLF}".encode())
    w.write(_CRLF.encode())