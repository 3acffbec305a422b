# tinyhttp

A small HTTP/1.1 toolkit: an incremental request parser, helpers for writing
response status lines and headers, a tiny TCP server that answers every
connection with `200 OK`, and two network tools for poking at it.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

All three commands use port 42069 unless `--port` is given.

Start the server. It replies `HTTP/1.1 200 OK` with the headers
`Content-Length: 0`, `Connection: close` and `Content-Type: text/plain` to
every connection, and stops cleanly on Ctrl-C or SIGTERM:

```
tinyhttp-server [--port PORT]
```

Listen on TCP and print each incoming request's request line, headers and
body. Requests that fail to parse are logged as errors:

```
tinyhttp-tcplistener [--port PORT]
```

Read lines from standard input, showing a `>` prompt, and send each one as a
UDP datagram (default destination `localhost`). It stops at end of input:

```
tinyhttp-udpsender [--host HOST] [--port PORT]
```

## Library use

Parse a request from any object with a `read(size)` method returning bytes:

```python
import io
from tinyhttp.request import request_from_reader

raw = b"POST /submit HTTP/1.1\r\nHost: localhost:42069\r\nContent-Length: 5\r\n\r\nhello"
req = request_from_reader(io.BytesIO(raw))
print(req.request_line.method)            # POST
print(req.request_line.http_version)      # 1.1
print(req.headers.get("Content-Length"))  # 5
print(req.body.as_string())               # hello
```

Only `GET` and `POST` with `HTTP/1.1` are accepted. Malformed input raises a
subclass of `RequestError` (itself a `ValueError`): `MalformedRequestError`,
`UnknownVerbError`, `UnsupportedVersionError` or `BodyTooLongError`. A body is
read only when `Content-Length` is present; without it the body is empty.

`tinyhttp.headers.Headers` is a `dict` keyed by lower-case field names.
`Headers.parse(data)` consumes at most one header line and returns
`(bytes_consumed, done)`; repeated headers are joined with `", "`, and bad
lines raise `HeaderError`. `Headers.get(key)` looks names up
case-insensitively and returns `""` when absent. `get_as_canonical` turns
`content-type` into `Content-Type`, and `get_default_headers(n)` returns the
headers the server sends.

`tinyhttp.tcplistener.format_request(req)` renders a parsed request as the
report the listener prints.

Write a response:

```python
import io
from tinyhttp.headers import get_default_headers
from tinyhttp.response import StatusCode, write_status_line, write_headers

out = io.BytesIO()
write_status_line(out, StatusCode.OK)
write_headers(out, get_default_headers(0))
```

`StatusCode` knows `OK`, `BAD_REQUEST` and `INTERNAL_SERVER_ERROR`; other
codes are written with an empty reason phrase.

Run the server from code; `Server` is also a context manager and exposes the
bound `port`:

```python
from tinyhttp.server import serve

with serve(0) as server:
    print(server.port)
```

`tinyhttp.udpsender.send_lines(lines, host, port)` sends each line as one
datagram and returns how many were sent.

## What it does not do

The server does not read or parse requests, route them, or serve content: it
writes the same empty `200 OK` response to every connection and closes it.
There is no support for keep-alive, chunked transfer encoding, TLS, or
methods other than `GET` and `POST` in the parser.