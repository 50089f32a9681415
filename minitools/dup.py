"""Find lines that appear more than once in files or standard input."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import TextIO

_STDIN_NAME = "<stdin>"


def _strip_line_end(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def count_lines(stream: Iterable[str]) -> Counter[str]:
    """Count the lines of a text stream, without their line endings."""
    return Counter(_strip_line_end(line) for line in stream)


def count_text(text: str) -> Counter[str]:
    """Count the pieces of text split on newlines, keeping a trailing empty piece."""
    return Counter(text.split("\n"))


def count_by_source(
    sources: Iterable[tuple[str, Iterable[str]]],
) -> dict[str, Counter[str]]:
    """Count lines per source: map each line to the hits in each named source."""
    counts: dict[str, Counter[str]] = {}
    for name, stream in sources:
        for line in stream:
            counts.setdefault(_strip_line_end(line), Counter())[name] += 1
    return counts


def duplicates(counts: Mapping[str, int]) -> Iterator[tuple[str, int]]:
    """Yield (line, count) for every line counted more than once."""
    for line, n in counts.items():
        if n > 1:
            yield line, n


def format_by_source(counts: Mapping[str, Mapping[str, int]]) -> str:
    """Report lines found in several sources or more than once in one source."""
    out = []
    for line, per_source in counts.items():
        if len(per_source) == 1 and sum(per_source.values()) <= 1:
            continue
        out.append(f"[Found in {len(per_source)} file(s)]\t{line}\n")
        out.extend(f"\t{n} hit(s) in {name}\n" for name, n in per_source.items())
    return "".join(out)


def _open_text(name: str) -> TextIO:
    return open(name, encoding="utf-8", errors="surrogateescape", newline="\n")


def _sources(files: Sequence[str]) -> Iterator[tuple[str, TextIO]]:
    if not files:
        yield _STDIN_NAME, sys.stdin
        return
    for name in files:
        try:
            handle = _open_text(name)
        except OSError as exc:
            print(f"dup: {exc}", file=sys.stderr)
            continue
        with handle:
            yield name, handle


def main(argv: Sequence[str] | None = None) -> int:
    """Print the count and text of every duplicated line."""
    parser = argparse.ArgumentParser(
        prog="dup", description="Print lines that appear more than once."
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--whole",
        action="store_true",
        help="read each named file at once and split it on newlines",
    )
    mode.add_argument(
        "--by-source",
        action="store_true",
        help="report the files each duplicated line was found in",
    )
    parser.add_argument("files", nargs="*")
    options = parser.parse_args(list(sys.argv[1:] if argv is None else argv))

    if options.by_source:
        print(format_by_source(count_by_source(_sources(options.files))), end="")
        return 0

    counts: Counter[str] = Counter()
    if options.whole:
        for name in options.files:
            try:
                data = Path(name).read_bytes()
            except OSError as exc:
                print(f"dup: {exc}", file=sys.stderr)
                continue
            counts.update(count_text(data.decode("utf-8", "surrogateescape")))
    else:
        for _, stream in _sources(options.files):
            counts.update(count_lines(stream))

    for line, n in duplicates(counts):
        print(f"{n}\t{line}")
    return 0