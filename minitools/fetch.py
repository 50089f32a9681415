"""Fetch URLs one after another or in parallel."""

from __future__ import annotations

import argparse
import http.client
import shutil
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import IO

_REQUEST_ERRORS = (OSError, ValueError, http.client.HTTPException)
_READ_ERRORS = (OSError, http.client.HTTPException)


@dataclass(frozen=True)
class FetchResult:
    """Status line and body of a response."""

    status: str
    body: bytes


def normalize_url(url: str) -> str:
    """Prefix the URL with http:// unless it already starts with it."""
    return url if url.startswith("http://") else "http://" + url


def _get(url: str) -> tuple[IO[bytes], str]:
    """Send a GET request; error statuses are returned, not raised."""
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        return err, f"{err.code} {err.reason}"
    return response, f"{response.status} {response.reason}"


def fetch(url: str) -> FetchResult:
    """Fetch the URL and return its status line and whole body."""
    response, status = _get(url)
    with response:
        return FetchResult(status, response.read())


def _format_duration(nanoseconds: int) -> str:
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    ns = abs(nanoseconds)

    def frac(value: int, unit: int) -> str:
        whole, rest = divmod(value, unit)
        digits = str(rest).zfill(len(str(unit)) - 1).rstrip("0")
        return f"{whole}.{digits}" if digits else str(whole)

    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return f"{sign}{frac(ns, 1_000)}µs"
    if ns < 1_000_000_000:
        return f"{sign}{frac(ns, 1_000_000)}ms"
    hours, rest = divmod(ns, 3600 * 10**9)
    minutes, rest = divmod(rest, 60 * 10**9)
    seconds = frac(rest, 10**9) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return sign + seconds


def output_filename(url: str, elapsed: float) -> str:
    """Name of the file a fetched body is saved in.

    For https URLs the elapsed time (in seconds) is written into the name.
    """
    if url.startswith("https://"):
        return url[len("https://"):] + _format_duration(round(elapsed * 1e9)) + ".txt"
    if url.startswith("http://"):
        return url[len("http://"):] + ".txt"
    return url + ".txt"


def fetch_timed(url: str, save: bool = False) -> str:
    """Fetch the URL and describe the time taken and bytes read, or the error.

    With save set, the body is written to the file named by output_filename.
    """
    start = time.perf_counter()
    try:
        response, _ = _get(url)
    except _REQUEST_ERRORS as exc:
        return str(exc)
    with response:
        if save:
            filename = output_filename(url, time.perf_counter() - start)
            try:
                target = open(filename, "wb")
            except OSError as exc:
                return f"error creating file {filename}: {exc}"
            with target:
                try:
                    nbytes = _copy_counting(response, target)
                except _READ_ERRORS as exc:
                    return f"while reading {url}: {exc}"
        else:
            try:
                nbytes = _copy_counting(response, None)
            except _READ_ERRORS as exc:
                return f"while reading {url}: {exc}"
    secs = time.perf_counter() - start
    return f"{secs:.2f}s {nbytes:7d} {url}"


def _copy_counting(source: IO[bytes], target: IO[bytes] | None) -> int:
    total = 0
    while chunk := source.read(64 * 1024):
        total += len(chunk)
        if target is not None:
            target.write(chunk)
    return total


def fetchall(urls: Iterable[str], save: bool = False) -> Iterator[str]:
    """Fetch the URLs in parallel, yielding each report as it completes."""
    url_list = list(urls)
    if not url_list:
        return
    with ThreadPoolExecutor(max_workers=len(url_list)) as pool:
        futures = [pool.submit(fetch_timed, url, save) for url in url_list]
        for future in as_completed(futures):
            yield future.result()


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def fetch_main(argv: Sequence[str] | None = None) -> int:
    """Print the body of each URL; stop with status 1 at the first error."""
    parser = argparse.ArgumentParser(prog="fetch", description="Fetch URLs.")
    parser.add_argument(
        "--prefix", action="store_true", help="add http:// to URLs that lack it"
    )
    parser.add_argument(
        "--status", action="store_true", help="print the HTTP status before the body"
    )
    parser.add_argument(
        "--stream", action="store_true", help="copy the body straight to the output"
    )
    parser.add_argument("urls", nargs="*")
    options = parser.parse_args(_args(argv))

    for url in options.urls:
        if options.prefix:
            url = normalize_url(url)
        try:
            response, status = _get(url)
        except _REQUEST_ERRORS as exc:
            print(f"fetch: {exc}", file=sys.stderr)
            return 1
        sys.stdout.flush()
        out = sys.stdout.buffer
        with response:
            try:
                if options.stream:
                    shutil.copyfileobj(response, out)
                    body = None
                else:
                    body = response.read()
            except _READ_ERRORS as exc:
                print(f"fetch: reading {url}{exc}", file=sys.stderr)
                return 1
        if body is not None:
            if options.status:
                out.write(f"http status code: {status}\nbody:\n".encode())
            out.write(body)
        out.flush()
    return 0


def fetchall_main(argv: Sequence[str] | None = None) -> int:
    """Fetch the URLs in parallel and report their times and sizes."""
    parser = argparse.ArgumentParser(
        prog="fetchall", description="Fetch URLs in parallel."
    )
    parser.add_argument(
        "--save", action="store_true", help="save each body to a file"
    )
    parser.add_argument("urls", nargs="*")
    options = parser.parse_args(_args(argv))
    start = time.perf_counter()
    for report in fetchall(options.urls, options.save):
        print(report)
    print(f"{time.perf_counter() - start:.2f}s elapsed")
    return 0