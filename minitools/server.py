"""Small HTTP servers: path echo, request counter, request inspector, Lissajous GIFs."""

from __future__ import annotations

import argparse
import enum
import io
import logging
import re
import sys
import threading
from collections.abc import Mapping, Sequence
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qsl, unquote, urlsplit

from .lissajous import lissajous

_log = logging.getLogger(__name__)


class Mode(enum.Enum):
    """What the server answers with."""

    ECHO = "echo"  # the request path
    COUNT = "count"  # the request path, counting requests
    INSPECT = "inspect"  # the whole request, counting requests
    LISSAJOUS = "lissajous"  # a Lissajous animation
    CYCLES = "cycles"  # a Lissajous animation with ?cycles=N


class RequestCounter:
    """A thread-safe count of handled requests."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    def increment(self) -> int:
        """Add one to the count and return the new count."""
        with self._lock:
            self._count += 1
            return self._count

    @property
    def value(self) -> int:
        """The current count."""
        with self._lock:
            return self._count


_ESCAPES = {
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\n": "\\n",
    "\r": "\\r", "\t": "\\t", "\v": "\\v", "\\": "\\\\", '"': '\\"',
}


def _quote(s: str) -> str:
    out = []
    for ch in s:
        code = ord(ch)
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif code < 0x80:
            out.append(f"\\x{code:02x}")
        elif code < 0x10000:
            out.append(f"\\u{code:04x}")
        else:
            out.append(f"\\U{code:08x}")
    return '"' + "".join(out) + '"'


def _quote_list(values: Sequence[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def describe_request(
    method: str,
    target: str,
    proto: str,
    headers: Mapping[str, Sequence[str]],
    host: str,
    remote_addr: str,
    form: Mapping[str, Sequence[str]],
) -> str:
    """Describe a request: request line, headers, host, peer and form values."""
    lines = [f"{method} {target} {proto}\n"]
    lines.extend(f"Header[{_quote(k)}] = {_quote_list(v)}\n" for k, v in headers.items())
    lines.append(f"Host = {_quote(host)}\n")
    lines.append(f"RemoteAddr = {_quote(remote_addr)}\n")
    lines.extend(f"Form[{_quote(k)}] = {_quote_list(v)}\n" for k, v in form.items())
    return "".join(lines)


_INT = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(f"strconv.Atoi: parsing {_quote(text)}: invalid syntax")
    value = int(text)
    if not -(2**63) <= value < 2**63:
        raise ValueError(f"strconv.Atoi: parsing {_quote(text)}: value out of range")
    return value


def _canonical_header(name: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


_TEXT = "text/plain; charset=utf-8"
_FORM_METHODS = ("POST", "PUT", "PATCH")


def make_handler(
    mode: Mode, counter: RequestCounter | None = None
) -> type[BaseHTTPRequestHandler]:
    """Build a request handler class serving in the given mode."""
    counter = counter if counter is not None else RequestCounter()
    serves_count = mode in (Mode.COUNT, Mode.INSPECT, Mode.CYCLES)

    class Handler(BaseHTTPRequestHandler):
        def log_message(self, format: str, *args: object) -> None:
            _log.debug("%s - %s", self.address_string(), format % args)

        def _send(self, body: bytes, content_type: str = _TEXT) -> None:
            self.send_response(200)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def _form(self, query: str) -> dict[str, list[str]]:
            form: dict[str, list[str]] = {}
            pairs = []
            ctype = self.headers.get("Content-Type", "")
            if self.command in _FORM_METHODS and ctype.startswith(
                "application/x-www-form-urlencoded"
            ):
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length).decode("utf-8", "replace")
                pairs.extend(parse_qsl(body, keep_blank_values=True))
            pairs.extend(parse_qsl(query, keep_blank_values=True))
            for key, value in pairs:
                form.setdefault(key, []).append(value)
            return form

        def _headers(self) -> dict[str, list[str]]:
            grouped: dict[str, list[str]] = {}
            for name, value in self.headers.items():
                key = _canonical_header(name)
                if key != "Host":
                    grouped.setdefault(key, []).append(value)
            return grouped

        def _dispatch(self) -> None:
            parts = urlsplit(self.path)
            if serves_count and parts.path == "/count":
                self._send(f"Count {counter.value}\n".encode())
                return
            if mode in (Mode.ECHO, Mode.COUNT):
                if mode is Mode.COUNT:
                    counter.increment()
                self._send(f"URL.Path = {_quote(unquote(parts.path))}\n".encode())
            elif mode is Mode.INSPECT:
                counter.increment()
                text = describe_request(
                    self.command,
                    self.path,
                    self.request_version,
                    self._headers(),
                    self.headers.get("Host", ""),
                    f"{self.client_address[0]}:{self.client_address[1]}",
                    self._form(parts.query),
                )
                self._send(text.encode())
            elif mode is Mode.LISSAJOUS:
                self._send_gif(5)
            else:
                raw = self._form(parts.query).get("cycles", [""])[0]
                try:
                    cycles = _atoi(raw)
                except ValueError as exc:
                    self._send(f"Invalid cycles value: {_quote(raw)}\n{exc}".encode())
                    return
                self._send_gif(cycles)

        def _send_gif(self, cycles: int) -> None:
            buffer = io.BytesIO()
            lissajous(buffer, cycles)
            self._send(buffer.getvalue(), "image/gif")

        do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = _dispatch

    return Handler


def serve(mode: Mode, address: str = "localhost:8000") -> None:
    """Serve in the given mode on host:port until interrupted."""
    host, _, port = address.rpartition(":")
    with ThreadingHTTPServer((host, int(port)), make_handler(mode)) as server:
        server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    """Start a server; exit with status 1 if it cannot listen."""
    parser = argparse.ArgumentParser(prog="server", description="Run a small HTTP server.")
    parser.add_argument(
        "--mode", choices=[m.value for m in Mode], default=Mode.ECHO.value
    )
    parser.add_argument("--address", default="localhost:8000")
    options = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    try:
        serve(Mode(options.mode), options.address)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0