"""A tiny HTTP server that answers ``/`` and echoes ``/echo/<text>`` paths."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from typing import Sequence, Union

ANY_ADDRESS = "0.0.0.0"
DEFAULT_PORT = 4221
REQUEST_LIMIT = 1024
BACKLOG = 5

OK_EMPTY = b"HTTP/1.1 200 OK\r\n\r\n"
NOT_FOUND = b"HTTP/1.1 404 Not Found\r\n\r\n"
_ECHO_PREFIX = "/echo/"

Request = Union[bytes, str]


def _decode(request: Request) -> str:
    if isinstance(request, bytes):
        return request.decode("latin-1")
    return request


def _request_target(request: Request) -> str:
    line = _decode(request).split("\r\n", 1)[0]
    tokens = [token for token in line.split(" ") if token]
    if len(tokens) < 2:
        raise ValueError("malformed request line")
    return tokens[1]


def _text_response(body: str, trailer: str = "") -> bytes:
    payload = body.encode("latin-1")
    head = (
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: text/plain\r\n"
        f"Content-Length: {len(payload)}\r\n\r\n"
    )
    return head.encode("latin-1") + payload + trailer.encode("latin-1")


def build_response(request: Request) -> bytes:
    """Answer a request: 200 for ``/``, an echo for ``/echo/...``, else 404."""
    path = _request_target(request)
    if path == "/":
        return OK_EMPTY
    if path.startswith(_ECHO_PREFIX):
        return _text_response(path[len(_ECHO_PREFIX):], "\r\n\r\n")
    return NOT_FOUND


def user_agent_response(request: Request) -> bytes:
    """Echo the value of the ``User-Agent`` header, or answer 404 without one."""
    for line in _decode(request).split("\r\n"):
        name, _, value = line.partition(":")
        if name.startswith("User-Agent"):
            return _text_response(value.strip(), "\r\n\r\n")
    return NOT_FOUND


def url_echo_response(request: Request) -> bytes:
    """Echo everything in the path after its first segment.

    ``GET /echo/abc`` is answered with the body ``abc``.
    """
    path = _request_target(request)
    _, separator, rest = path.lstrip("/").partition("/")
    if not separator or not rest:
        raise ValueError("path has nothing after its first segment")
    return _text_response(rest)


def handle_client(conn: socket.socket) -> bytes:
    """Read one request from ``conn``, send the answer, close it; return the answer."""
    with conn:
        request = conn.recv(REQUEST_LIMIT)
        sys.stdout.write(request.decode("latin-1"))
        sys.stdout.flush()
        try:
            response = build_response(request)
        except ValueError:
            response = NOT_FOUND
        conn.sendall(response)
    return response


def _listen(host: str, port: int) -> socket.socket:
    socket.inet_pton(socket.AF_INET, host)
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        option = getattr(socket, "SO_REUSEPORT", socket.SO_REUSEADDR)
        server.setsockopt(socket.SOL_SOCKET, option, 1)
        server.bind((host, port))
        server.listen(BACKLOG)
    except BaseException:
        server.close()
        raise
    return server


def serve(host: str = ANY_ADDRESS, port: int = DEFAULT_PORT) -> None:
    """Accept clients forever, answering each in its own thread."""
    with _listen(host, port) as server:
        print(f"Server listening on IP {host}, port {port}", flush=True)
        while True:
            try:
                conn, _ = server.accept()
            except OSError as exc:
                print(f"Error accepting connection: {exc}", file=sys.stderr)
                continue
            print("Client connected", flush=True)
            threading.Thread(target=handle_client, args=(conn,), daemon=True).start()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tinkerkit-http", description="Serve / and /echo/<text>."
    )
    parser.add_argument("address", nargs="+", metavar="ARG", help="[IP] PORT")
    args = parser.parse_args(argv)
    if len(args.address) > 2:
        parser.error("expected [IP] PORT")
    *hosts, port_text = args.address
    host = hosts[0] if hosts else ANY_ADDRESS
    try:
        port = int(port_text)
    except ValueError:
        parser.error(f"invalid port: {port_text!r}")
    if not 0 <= port <= 65535:
        parser.error(f"invalid port: {port_text!r}")
    try:
        serve(host, port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Error creating socket: {exc}", file=sys.stderr)
        return 1
    return 0