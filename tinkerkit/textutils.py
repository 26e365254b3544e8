"""String helpers: lengths, substring search, reversal and file-name stems."""

from __future__ import annotations


def total_length(*args: str) -> int:
    """Return the combined length of all the given strings."""
    return sum(len(text) for text in args)


def find_substring(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty ``needle`` is found at index 0.
    """
    return haystack.find(needle)


def reverse_string(text: str) -> str:
    return text[::-1]


def strip_extension(filename: str) -> str:
    """Drop the last extension from ``filename``.

    Trailing dots are ignored when looking for the extension. A name with
    no dot is returned unchanged; a name whose only dot leads it (such as
    ``.bashrc``) loses just that dot.
    """
    trimmed = filename.rstrip(".")
    stem, dot, extension = trimmed.rpartition(".")
    if not dot:
        return filename
    return stem if stem else extension


def reverse_words(text: str) -> str:
    """Return the space-separated words of ``text`` in reverse order."""
    words = [word for word in text.split(" ") if word]
    return " ".join(reversed(words))