"""Small text utilities: path basenames, digit grouping, anagrams and echo."""

from __future__ import annotations

import argparse
import functools
import sys
import time
from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


def basename(s: str) -> str:
    """Remove directory components and the last .suffix: a/b.c.go => b.c."""
    name = s.rpartition("/")[2]
    head, dot, _ = name.rpartition(".")
    return head if dot else name


def comma(s: str) -> str:
    """Insert commas every three digits in a non-negative decimal integer string."""
    if len(s) <= 3:
        return s
    return comma(s[:-3]) + "," + s[-3:]


def ints_to_string(values: Iterable[int]) -> str:
    """Format integers like a bracketed list with comma separators."""
    return "[" + ", ".join(f"{int(v):d}" for v in values) + "]"


def is_anagram(s1: str, s2: str) -> bool:
    """Report whether the two strings hold the same characters, counted."""
    return len(s1) == len(s2) and Counter(s1) == Counter(s2)


def join_args(args: Iterable[str], sep: str = " ") -> str:
    """Join the arguments with the separator."""
    return sep.join(args)


@dataclass(frozen=True)
class JoinTiming:
    """Result and duration of one way of joining the arguments."""

    method: int
    text: str
    nanoseconds: int


def _concat_loop(args: Sequence[str]) -> str:
    s, sep = "", ""
    for arg in args:
        s += sep + arg
        sep = " "
    return s


def _concat_reduce(args: Sequence[str]) -> str:
    if not args:
        return ""
    return functools.reduce(lambda acc, arg: acc + " " + arg, args[1:], args[0])


def time_join_methods(args: Sequence[str]) -> list[JoinTiming]:
    """Join a full argument vector three ways and time each.

    The first two methods join the arguments after the program name by
    repeated concatenation; the third joins the whole vector at once.
    """
    methods = (
        lambda: _concat_loop(args[1:]),
        lambda: _concat_reduce(args[1:]),
        lambda: " ".join(args),
    )
    timings = []
    for number, method in enumerate(methods, 1):
        start = time.perf_counter_ns()
        text = method()
        timings.append(JoinTiming(number, text, time.perf_counter_ns() - start))
    return timings


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        line = line[:-1] if line.endswith("\n") else line
        yield line[:-1] if line.endswith("\r") else line


class _FlagError(ValueError):
    pass


class _HelpRequested(Exception):
    pass


_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

_ECHO_USAGE = (
    "Usage of echo:\n"
    "  -n\tomit trailing newline\n"
    "  -s string\n"
    '    \tseparator (default " ")'
)


def _parse_echo_flags(argv: Sequence[str]) -> tuple[bool, str, list[str]]:
    omit_newline, sep = False, " "
    rest = deque(argv)
    while rest:
        arg = rest[0]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        rest.popleft()
        if arg == "--":
            break
        name = arg[2:] if arg.startswith("--") else arg[1:]
        if not name or name[0] in "-=":
            raise _FlagError(f"bad flag syntax: {arg}")
        name, has_value, value = name.partition("=")
        if name == "n":
            if not has_value:
                omit_newline = True
            elif value in _TRUE:
                omit_newline = True
            elif value in _FALSE:
                omit_newline = False
            else:
                raise _FlagError(f'invalid boolean value "{value}" for -n: parse error')
        elif name == "s":
            if not has_value:
                if not rest:
                    raise _FlagError("flag needs an argument: -s")
                value = rest.popleft()
            sep = value
        elif name in ("h", "help"):
            raise _HelpRequested
        else:
            raise _FlagError(f"flag provided but not defined: -{name}")
    return omit_newline, sep, list(rest)


def echo_main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments; -s sets the separator, -n omits the newline."""
    try:
        omit_newline, sep, args = _parse_echo_flags(_args(argv))
    except _HelpRequested:
        print(_ECHO_USAGE, file=sys.stderr)
        return 0
    except _FlagError as exc:
        print(exc, file=sys.stderr)
        print(_ECHO_USAGE, file=sys.stderr)
        return 2
    print(join_args(args, sep), end="" if omit_newline else "\n")
    return 0


def basename_main(argv: Sequence[str] | None = None) -> int:
    """Print the basename of every line of standard input."""
    for line in _lines(sys.stdin):
        print(basename(line))
    return 0


def comma_main(argv: Sequence[str] | None = None) -> int:
    """Print each argument with its digits grouped by commas."""
    for arg in _args(argv):
        print(f" {comma(arg)}")
    return 0


def anagram_main(argv: Sequence[str] | None = None) -> int:
    """Report whether the first two arguments are anagrams."""
    args = _args(argv)
    if len(args) < 2:
        return 0
    first, second = args[0], args[1]
    verdict = "is anagram" if is_anagram(first, second) else "is not anagram"
    print(f"{first} and {second} {verdict}")
    return 0


def _greeting(name: str = "World") -> str:
    return f"Hello, {name}!"


def hello_main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting."""
    sys.stdout.write(_greeting() + "\n")
    return 0


def args_main(argv: Sequence[str] | None = None) -> int:
    """List the arguments with their indexes, or echo them with the program name,
    or time several ways of joining them."""
    parser = argparse.ArgumentParser(prog="args")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--with-program", action="store_true", help="echo the program name too"
    )
    mode.add_argument(
        "--timing", action="store_true", help="time three ways of joining"
    )
    parser.add_argument("args", nargs="*")
    options = parser.parse_args(_args(argv))
    full = [sys.argv[0], *options.args]
    if options.with_program:
        print(join_args(full))
    elif options.timing:
        for timing in time_join_methods(full):
            print(timing.text)
            print(
                f"Total Runtime | Method {timing.method}: ",
                timing.nanoseconds,
                "nanoseconds",
            )
    else:
        for idx, arg in enumerate(options.args):
            print(f"idx: {idx}, arg: {arg}")
    return 0