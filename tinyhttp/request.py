"""Incremental parsing of HTTP/1.1 requests from a byte stream."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional, Protocol

from tinyhttp.headers import CONTENT_LENGTH, Headers

_CRLF = b"\r\n"
_INITIAL_BUFFER_SIZE = 8
_SUPPORTED_METHODS = ("GET", "POST")
_SUPPORTED_VERSION = "HTTP/1.1"


class RequestError(ValueError):
    """Base class for errors raised while parsing a request."""


class MalformedRequestError(RequestError):
    """The request does not follow the expected structure."""


class UnknownVerbError(RequestError):
    """The request method is not one the server accepts."""


class UnsupportedVersionError(RequestError):
    """The request names an HTTP version other than 1.1."""


class BodyTooLongError(RequestError):
    """The body holds more bytes than its Content-Length announced."""


class _Reader(Protocol):
    def read(self, size: int, /) -> bytes: ...


class _State(enum.Enum):
    INITIALIZED = enum.auto()
    PARSING_HEADERS = enum.auto()
    PARSING_BODY = enum.auto()
    DONE = enum.auto()


@dataclass(frozen=True)
class RequestLine:
    """The method, target and version from the first line of a request."""

    http_version: str = ""
    request_target: str = ""
    method: str = ""


@dataclass
class Body:
    """The request body, collected until ``expected_length`` bytes arrive."""

    content: bytearray = field(default_factory=bytearray)
    expected_length: int = 0

    def _feed(self, data: bytes) -> tuple[int, bool]:
        if self.expected_length == 0:
            return 0, True
        self.content += data
        if len(self.content) > self.expected_length:
            raise BodyTooLongError("Request body is longer than informed value")
        return len(data), len(self.content) == self.expected_length

    def as_string(self) -> str:
        """Return the body decoded as UTF-8."""
        return self.content.decode("utf-8", errors="replace")


@dataclass
class Request:
    """A parsed HTTP request."""

    request_line: RequestLine = field(default_factory=RequestLine)
    headers: Headers = field(default_factory=Headers)
    body: Body = field(default_factory=Body)
    _state: _State = field(default=_State.INITIALIZED, repr=False, compare=False)

    def _parse(self, data: bytes, req_end: bool) -> int:
        finalize: Optional[Callable[[], None]] = None
        if self._state is _State.INITIALIZED:
            consumed, done = self._parse_request_line(data)
            next_state = _State.PARSING_HEADERS
        elif self._state is _State.PARSING_HEADERS:
            consumed, done = self.headers.parse(data)
            next_state = _State.PARSING_BODY
            finalize = self._prepare_body
        elif self._state is _State.PARSING_BODY:
            consumed, done = self.body._feed(data)
            next_state = _State.DONE
        else:
            raise RuntimeError("Trying to read data in done state")

        if req_end:
            if not done:
                raise MalformedRequestError("Request is malformed")
            self._state = _State.DONE
            return consumed
        if done:
            if finalize is not None:
                finalize()
            self._state = next_state
        return consumed

    def _parse_request_line(self, data: bytes) -> tuple[int, bool]:
        idx = data.find(_CRLF)
        if idx < 0:
            return 0, False
        self.request_line = _request_line_from_string(
            data[:idx].decode("utf-8", errors="replace")
        )
        return idx + len(_CRLF), True

    def _prepare_body(self) -> None:
        self.body.expected_length = _content_length(self.headers.get(CONTENT_LENGTH))


def _content_length(value: str) -> int:
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        raise MalformedRequestError(f"Invalid content length: {value!r}") from None


def _request_line_from_string(line: str) -> RequestLine:
    parts = line.split(" ")
    if len(parts) != 3:
        raise MalformedRequestError("Request is malformed")
    method, target, version = parts
    if method not in _SUPPORTED_METHODS:
        raise UnknownVerbError("HTTP verb is invalid")
    if version != _SUPPORTED_VERSION:
        raise UnsupportedVersionError("HTTP version is not supported")
    return RequestLine(http_version="1.1", request_target=target, method=method)


def request_from_reader(reader: _Reader) -> Request:
    """Read and parse one request from a binary stream with a ``read(size)`` method.

    Each read asks for no more than the free room in a buffer that starts
    small and doubles when full; one element is parsed per read.
    """
    request = Request()
    buf = bytearray()
    capacity = _INITIAL_BUFFER_SIZE
    eof_hit = False

    while request._state is not _State.DONE:
        if len(buf) >= capacity:
            capacity *= 2
        chunk = reader.read(capacity - len(buf))
        if not chunk:
            if eof_hit:
                raise MalformedRequestError("Request is malformed")
            eof_hit = True
        else:
            buf += chunk

        consumed = request._parse(bytes(buf), eof_hit)
        del buf[:consumed]

    return request