"""Bridge between a serial device and a TCP connection, in either direction."""

from __future__ import annotations

import argparse
import logging
import os
import signal
import socket
import sys
import termios
import time
from typing import BinaryIO, Sequence, Union

logger = logging.getLogger(__name__)

BUFFER_SIZE = 256
SKIP_COUNT = 5
DEFAULT_BAUDRATE = 9600
UART_DEVICE = "/dev/serial0"
READ_INTERVAL = 1.0
RETRY_INTERVAL = 0.1
BACKLOG = 5


class _Stop(Exception):
    def __init__(self, signum: int) -> None:
        super().__init__(signum)
        self.signum = signum


def open_uart(device: Union[str, os.PathLike], baudrate: int = DEFAULT_BAUDRATE) -> BinaryIO:
    """Open ``device`` for non-blocking reading and writing as 8N1 at ``baudrate``.

    A device that is not a terminal is opened as a plain file.
    """
    speed = getattr(termios, f"B{baudrate}", None)
    if speed is None:
        raise ValueError(f"unsupported baud rate: {baudrate}")
    fd = os.open(device, os.O_RDWR | os.O_NOCTTY | os.O_NONBLOCK)
    try:
        attrs = termios.tcgetattr(fd)
    except termios.error:
        pass
    else:
        attrs[2] &= ~(termios.PARENB | termios.CSTOPB | termios.CSIZE)
        attrs[2] |= termios.CS8
        attrs[4] = attrs[5] = speed
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    return open(fd, "r+b", buffering=0)


def forward_to_uart(sock: socket.socket, uart: BinaryIO, skip: int = SKIP_COUNT) -> int:
    """Copy what ``sock`` receives to ``uart`` until the peer closes.

    The first ``skip`` reads are dropped. Returns the number of bytes written.
    """
    skipped = 0
    forwarded = 0
    while data := sock.recv(BUFFER_SIZE - 1):
        if skipped < skip:
            skipped += 1
            continue
        print(f"Received from server: {data.decode('latin-1')}", flush=True)
        written = uart.write(data)
        if written is None:
            raise BlockingIOError("UART is not ready for writing")
        forwarded += written
        time.sleep(READ_INTERVAL)
    return forwarded


def serve_uart(uart: BinaryIO, sock: socket.socket) -> int:
    """Send what ``uart`` yields to ``sock`` until the input ends or the client leaves.

    Returns the number of bytes sent.
    """
    sent = 0
    while True:
        try:
            data = uart.read(BUFFER_SIZE - 1)
        except BlockingIOError:
            data = None
        except OSError as exc:
            logger.error("Error reading from UART: %s", exc)
            time.sleep(RETRY_INTERVAL)
            continue
        if data is None:
            time.sleep(RETRY_INTERVAL)
            continue
        if not data:
            return sent
        try:
            sock.sendall(data)
        except OSError as exc:
            logger.error("Error writing to client: %s", exc)
            return sent
        sent += len(data)
        print(f"Sent to client: {data.decode('latin-1')}", flush=True)


def _listen(ip: str, port: int) -> socket.socket:
    socket.inet_pton(socket.AF_INET, ip)
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((ip, port))
        server.listen(BACKLOG)
    except BaseException:
        server.close()
        raise
    return server


def client_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tinkerkit-uart-client", description="Forward a TCP stream to a UART."
    )
    parser.add_argument("ip")
    parser.add_argument("port", type=int)
    parser.add_argument("--device", default=UART_DEVICE)
    args = parser.parse_args(argv)

    try:
        uart = open_uart(args.device)
    except (OSError, ValueError) as exc:
        print(f"Error opening UART: {exc}", file=sys.stderr)
        return 1
    with uart:
        try:
            socket.inet_pton(socket.AF_INET, args.ip)
        except OSError:
            print(f"Invalid IP address: {args.ip}", file=sys.stderr)
            return 1
        try:
            sock = socket.create_connection((args.ip, args.port))
        except OSError as exc:
            print(f"Error connecting to server: {exc}", file=sys.stderr)
            return 1
        with sock:
            try:
                forward_to_uart(sock, uart)
            except OSError as exc:
                print(f"Error forwarding to UART: {exc}", file=sys.stderr)
    return 0


def server_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tinkerkit-uart-server", description="Serve a UART's output over TCP."
    )
    parser.add_argument("ip")
    parser.add_argument("port", type=int)
    parser.add_argument("device")
    args = parser.parse_args(argv)

    def stop(signum, frame):
        raise _Stop(signum)

    previous = {
        signum: signal.signal(signum, stop) for signum in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        try:
            fd = os.open(args.device, os.O_RDONLY | os.O_NOCTTY | os.O_NONBLOCK)
        except OSError as exc:
            print(f"Error opening UART device: {exc}", file=sys.stderr)
            return 1
        with open(fd, "rb", buffering=0) as uart:
            try:
                server = _listen(args.ip, args.port)
            except OSError as exc:
                print(f"Error setting up server: {exc}", file=sys.stderr)
                return 1
            with server:
                print(f"Server listening on {args.ip}:{args.port}", flush=True)
                while True:
                    try:
                        client, _ = server.accept()
                    except OSError as exc:
                        print(f"Error accepting client connection: {exc}", file=sys.stderr)
                        continue
                    print("Client connected", flush=True)
                    with client:
                        serve_uart(uart, client)
    except _Stop as stopped:
        print(f"Received signal {stopped.signum}, cleaning up and exiting...")
        return 0
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)