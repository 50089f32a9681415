"""Network interface flags as a bit set."""

from __future__ import annotations

import enum
from collections.abc import Sequence


class Flags(enum.IntFlag):
    """Capabilities of a network interface."""

    UP = 1 << 0
    BROADCAST = 1 << 1
    LOOPBACK = 1 << 2
    POINT_TO_POINT = 1 << 3
    MULTICAST = 1 << 4


def is_up(v: Flags) -> bool:
    """Report whether the interface is up."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return the flags with the up bit cleared."""
    return Flags(int(v) & ~int(Flags.UP))


def set_broadcast(v: Flags) -> Flags:
    """Return the flags with the broadcast bit set."""
    return Flags(v | Flags.BROADCAST)


def is_cast(v: Flags) -> bool:
    """Report whether the interface supports broadcast or multicast."""
    return bool(v & (Flags.BROADCAST | Flags.MULTICAST))


def _show(v: Flags, state: bool) -> str:
    return f"{int(v):b} {'true' if state else 'false'}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the flag values and a short demonstration of the operations."""
    print(f"FlagUp: {int(Flags.UP)}")
    print(f"FlagBroadcast: {int(Flags.BROADCAST)}")
    print(f"FlagLoopback: {int(Flags.LOOPBACK)}")
    print(f"FlagPointToPoint: {int(Flags.POINT_TO_POINT)}")
    print(f"FlagMulticast: {int(Flags.MULTICAST)}")
    v = Flags.MULTICAST | Flags.UP
    print(_show(v, is_up(v)))
    v = turn_down(v)
    print(_show(v, is_up(v)))
    v = set_broadcast(v)
    print(_show(v, is_up(v)))
    print(_show(v, is_cast(v)))
    return 0