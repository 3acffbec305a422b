import io
import signal
import socket
import threading
import time

from tinyhttp.request import request_from_reader
from tinyhttp.tcplistener import format_request, main

GOOD_REQUEST = (
    b"POST /submit HTTP/1.1\r\n"
    b"Host: localhost:42069\r\n"
    b"Content-Length: 13\r\n"
    b"\r\n"
    b"hello world!\n"
)


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _connect_with_retry(port, deadline=5.0):
    end = time.monotonic() + deadline
    while True:
        try:
            return socket.create_connection(("127.0.0.1", port), timeout=5)
        except ConnectionRefusedError:
            if time.monotonic() > end:
                raise
            time.sleep(0.05)


def _send_and_wait_for_close(port, payload):
    with _connect_with_retry(port) as conn:
        conn.sendall(payload)
        conn.shutdown(socket.SHUT_WR)
        try:
            while conn.recv(1024):
                pass
        except ConnectionResetError:
            pass


def _clients_then_interrupt(port, payloads, errors):
    main_ident = threading.main_thread().ident
    try:
        for payload in payloads:
            _send_and_wait_for_close(port, payload)
    except Exception as exc:
        errors.append(exc)
    finally:
        signal.pthread_kill(main_ident, signal.SIGINT)


def test_format_request_get():
    req = request_from_reader(
        io.BytesIO(b"GET /coffee HTTP/1.1\r\nHost: localhost:42069\r\n\r\n")
    )
    assert format_request(req) == (
        "Request line:\n"
        "- Method: GET\n"
        "- Target: /coffee\n"
        "- Version: 1.1\n"
        "Headers:\n"
        "- host: localhost:42069\n"
        "Body:\n"
        "\n"
    )


def test_format_request_includes_headers_and_body():
    req = request_from_reader(io.BytesIO(GOOD_REQUEST))
    report = format_request(req)
    assert report.startswith("Request line:\n- Method: POST\n- Target: /submit\n")
    assert "- content-length: 13\n" in report
    assert report.endswith("Body:\nhello world!\n\n")


def test_main_prints_received_request(capsys):
    port = _free_port()
    errors = []
    client = threading.Thread(
        target=_clients_then_interrupt, args=(port, [GOOD_REQUEST], errors)
    )
    client.start()
    status = main(["--port", str(port)])
    client.join()
    assert status == 0
    assert errors == []
    expected = format_request(request_from_reader(io.BytesIO(GOOD_REQUEST)))
    assert capsys.readouterr().out == expected


def test_main_fails_when_port_in_use():
    with socket.create_server(("", 0)) as blocker:
        port = blocker.getsockname()[1]
        assert main(["--port", str(port)]) == 1