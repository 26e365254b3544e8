"""Small numeric algorithms: Fibonacci, N-queens, bit counting, decimal parsing."""

from __future__ import annotations

MAX_FIBONACCI_INDEX = 100_000
_UINT32_LIMIT = 1 << 32


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting ``fibonacci(1) == 1``."""
    if not 1 <= n <= MAX_FIBONACCI_INDEX:
        raise ValueError(f"n must be between 1 and {MAX_FIBONACCI_INDEX}")
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def count_n_queens(n: int) -> int:
    """Count the ways to place ``n`` non-attacking queens on an n-by-n board."""
    if n < 0:
        raise ValueError("n must not be negative")
    full = (1 << n) - 1

    def solve(columns: int, left_diagonals: int, right_diagonals: int) -> int:
        if columns == full:
            return 1
        total = 0
        free = full & ~(columns | left_diagonals | right_diagonals)
        while free:
            bit = free & -free
            free ^= bit
            total += solve(
                columns | bit,
                ((left_diagonals | bit) << 1) & full,
                (right_diagonals | bit) >> 1,
            )
        return total

    return solve(0, 0, 0)


def popcount(x: int) -> int:
    """Count the set bits of an unsigned 32-bit value."""
    if not 0 <= x < _UINT32_LIMIT:
        raise ValueError("value must fit in an unsigned 32-bit integer")
    return bin(x).count("1")


def parse_decimal(text: str) -> int:
    """Parse a string of decimal digits; the empty string gives 0."""
    value = 0
    for char in text:
        if char not in "0123456789":
            raise ValueError(f"not a decimal digit: {char!r}")
        value = value * 10 + (ord(char) - ord("0"))
    return value