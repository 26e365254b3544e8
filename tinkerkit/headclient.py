"""Send an HTTP ``HEAD /`` request and return whatever the server answers."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Sequence

DEFAULT_HOST = "192.168.1.39"
DEFAULT_PORT = 8080
HEAD_REQUEST = b"HEAD / HTTP/1.0\r\n\r\n"
_CHUNK_SIZE = 1024


def head_request(host: str, port: int) -> bytes:
    """Send ``HEAD /`` to ``host:port`` and read the reply until the server closes."""
    with socket.create_connection((host, port)) as sock:
        sock.sendall(HEAD_REQUEST)
        chunks = []
        while chunk := sock.recv(_CHUNK_SIZE):
            chunks.append(chunk)
    return b"".join(chunks)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tinkerkit-head", description="Print a server's answer to HEAD /."
    )
    parser.add_argument("host", nargs="?", default=DEFAULT_HOST)
    parser.add_argument("port", nargs="?", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        reply = head_request(args.host, args.port)
    except OSError as exc:
        print(f"Error connecting to server: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(reply.decode("latin-1"))
    sys.stdout.flush()
    return 0