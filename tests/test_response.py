import io

import pytest

from tinyhttp.headers import get_default_headers
from tinyhttp.response import StatusCode, write_headers, write_status_line


@pytest.mark.parametrize(
    "code, text",
    [
        (StatusCode.OK, "OK"),
        (StatusCode.BAD_REQUEST, "Bad Request"),
        (StatusCode.INTERNAL_SERVER_ERROR, "Internal Server Error"),
    ],
)
def test_status_text(code, text):
    assert code.text() == text


@pytest.mark.parametrize(
    "code, expected",
    [
        (StatusCode.OK, b"HTTP/1.1 200 OK\r\n"),
        (StatusCode.BAD_REQUEST, b"HTTP/1.1 400 Bad Request\r\n"),
        (400, b"HTTP/1.1 400 Bad Request\r\n"),
        (StatusCode.INTERNAL_SERVER_ERROR, b"HTTP/1.1 500 Internal Server Error\r\n"),
        (418, b"HTTP/1.1 418 \r\n"),
    ],
)
def test_write_status_line(code, expected):
    out = io.BytesIO()
    write_status_line(out, code)
    assert out.getvalue() == expected


@pytest.mark.parametrize(
    "headers, expected",
    [
        ({"Connection": "close"}, b"Connection: close\r\n\r\n"),
        ({}, b"\r\n"),
    ],
)
def test_write_headers(headers, expected):
    out = io.BytesIO()
    write_headers(out, headers)
    assert out.getvalue() == expected


def test_write_default_headers_contains_each_field():
    out = io.BytesIO()
    write_headers(out, get_default_headers(0))
    lines = out.getvalue().split(b"\r\n")
    assert lines[-2:] == [b"", b""]
    assert sorted(lines[:-2]) == sorted(
        [b"Content-Length: 0", b"Connection: close", b"Content-Type: text/plain"]
    )