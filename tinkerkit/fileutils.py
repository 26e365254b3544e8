"""File utilities: stream copying, removing executables, student records."""

from __future__ import annotations

import argparse
import logging
import os
import stat
import subprocess
import sys
from typing import BinaryIO, Sequence, Union

logger = logging.getLogger(__name__)

DEFAULT_SCRIPT = "./script.py"
DEFAULT_DETAILS = "student_detail.txt"
_CHUNK_SIZE = 4096


def echo(source: BinaryIO, sink: BinaryIO) -> int:
    """Copy everything from ``source`` to ``sink``; return the byte count."""
    total = 0
    while chunk := source.read(_CHUNK_SIZE):
        written = sink.write(chunk)
        if written is not None and written != len(chunk):
            raise OSError("Error writing to output")
        total += len(chunk)
    return total


def remove_executables(directory: Union[str, os.PathLike]) -> list[str]:
    """Delete the regular files in ``directory`` that the owner may execute.

    Entries that cannot be examined are skipped. Returns the removed paths.
    """
    removed = []
    with os.scandir(directory) as entries:
        for entry in entries:
            path = os.path.join(directory, entry.name)
            try:
                mode = os.stat(path).st_mode
            except OSError as exc:
                logger.warning("stat %s: %s", path, exc)
                continue
            if not (stat.S_ISREG(mode) and mode & stat.S_IXUSR):
                continue
            try:
                os.unlink(path)
            except OSError as exc:
                logger.warning("unlink %s: %s", path, exc)
            else:
                removed.append(path)
    return removed


def run_student_script(
    count: int,
    script: Union[str, Sequence[str]] = DEFAULT_SCRIPT,
    details: Union[str, os.PathLike] = DEFAULT_DETAILS,
) -> list[str]:
    """Run the record generator for ``count`` students, then read its output.

    ``script`` is a program path or a command given as a list of arguments;
    the count is passed as its last argument. Its exit status is ignored.
    """
    command = [script] if isinstance(script, str) else list(script)
    subprocess.run([*command, str(count)], check=False)
    with open(details, encoding="utf-8") as handle:
        return handle.readlines()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tinkerkit-files")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("echo", help="copy standard input to standard output")
    remove = commands.add_parser("rm-exec", help="delete executable files")
    remove.add_argument("directory")
    students = commands.add_parser("students", help="generate and show student records")
    students.add_argument("count", type=int, nargs="?")
    students.add_argument("--script", default=DEFAULT_SCRIPT)
    students.add_argument("--details", default=DEFAULT_DETAILS)
    args = parser.parse_args(argv)

    if args.command == "echo":
        try:
            echo(sys.stdin.buffer, sys.stdout.buffer)
            sys.stdout.buffer.flush()
        except OSError as exc:
            print(f"Error copying input: {exc}", file=sys.stderr)
            return 1
        return 0

    if args.command == "rm-exec":
        try:
            removed = remove_executables(args.directory)
        except OSError as exc:
            print(f"opendir: {exc}", file=sys.stderr)
            return 1
        for path in removed:
            print(f"Deleted: {path}")
        return 0

    count = args.count
    if count is None:
        count = int(input("number of students: "))
    for line in run_student_script(count, args.script, args.details):
        print(f"Read: {line}", end="")
    return 0