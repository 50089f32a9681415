"""Population count (number of set bits) of unsigned 64-bit integers."""

from __future__ import annotations

import operator
import sys
from collections.abc import Sequence

_MASK64 = (1 << 64) - 1


def _build_table() -> bytes:
    table = bytearray(256)
    for i in range(1, 256):
        table[i] = table[i // 2] + (i & 1)
    return bytes(table)


# _PC[i] is the number of set bits in the byte i.
_PC = _build_table()


def _check(x: int) -> int:
    value = operator.index(x)
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{value} is not an unsigned 64-bit integer")
    return value


def pop_count(x: int) -> int:
    """Return the number of set bits in x using the byte table."""
    return sum(_PC[byte] for byte in _check(x).to_bytes(8, "little"))


def pop_count_loop(x: int) -> int:
    """Return the number of set bits in x, looking up one byte per step."""
    value = _check(x)
    count = 0
    for shift in range(0, 64, 8):
        count += _PC[(value >> shift) & 0xFF]
    return count


def pop_count_shift64(x: int) -> int:
    """Return the number of set bits in x by testing each of the 64 bits."""
    value = _check(x)
    count = 0
    for _ in range(64):
        count += value & 1
        value >>= 1
    return count


def pop_count_clear_nonzero(x: int) -> int:
    """Return the number of set bits in x by clearing the lowest set bit."""
    value = _check(x)
    count = 0
    while value:
        value &= value - 1
        count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Print the population counts of 15, 1 and 7 with every method."""
    methods = (pop_count, pop_count_loop, pop_count_shift64, pop_count_clear_nonzero)
    for value in (15, 1, 7):
        for method in methods:
            print(method(value))
    sys.stdout.flush()
    return 0