import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from minitools.fetch import (
    fetch,
    fetch_main,
    fetch_timed,
    fetchall,
    fetchall_main,
    normalize_url,
    output_filename,
)

MISSING_BODY = b"not here"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/missing":
            code, body = 404, MISSING_BODY
        else:
            code, body = 200, f"hello from {self.path}".encode()
        self.send_response(code)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    thread.join()


@pytest.fixture
def dead_url():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/"


def test_normalize_url_adds_scheme():
    assert normalize_url("example.com") == "http://example.com"


def test_normalize_url_keeps_http():
    assert normalize_url("http://example.com/a") == "http://example.com/a"


def test_normalize_url_prefixes_https_too():
    assert normalize_url("https://example.com") == "http://https://example.com"


def test_output_filename_http():
    assert output_filename("http://example.com/page", 3.0) == "example.com/page.txt"


def test_output_filename_without_scheme():
    assert output_filename("ftp.example.com", 1.0) == "ftp.example.com.txt"


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (0.0, "example.com0s.txt"),
        (0.0015, "example.com1.5ms.txt"),
        (2.0, "example.com2s.txt"),
    ],
)
def test_output_filename_https_includes_elapsed(elapsed, expected):
    assert output_filename("https://example.com", elapsed) == expected


def test_fetch_returns_body(base_url):
    result = fetch(base_url + "/a")
    assert result.body == b"hello from /a"
    assert result.status.startswith("200 ")


def test_fetch_error_status_is_returned(base_url):
    result = fetch(base_url + "/missing")
    assert result.status.startswith("404 ")
    assert result.body == MISSING_BODY


def test_fetch_unreachable_raises(dead_url):
    with pytest.raises(OSError):
        fetch(dead_url)


def test_fetch_timed_reports_size(base_url):
    url = base_url + "/abc"
    report = fetch_timed(url)
    secs, nbytes, reported_url = report.split()
    assert reported_url == url
    assert int(nbytes) == len(b"hello from /abc")
    assert secs.endswith("s")


def test_fetch_timed_saves_body(base_url, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    report = fetch_timed(base_url, save=True)
    assert report.endswith(base_url)
    saved = tmp_path / output_filename(base_url, 0.0)
    assert saved.read_bytes() == b"hello from /"


def test_fetch_timed_file_error(base_url, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    report = fetch_timed(base_url + "/no/such/dir", save=True)
    assert report.startswith("error creating file ")


def test_fetch_timed_unreachable(dead_url):
    assert "urlopen error" in fetch_timed(dead_url)


def test_fetchall_reports_every_url(base_url):
    urls = [base_url + "/one", base_url + "/two", base_url + "/three"]
    reports = list(fetchall(urls))
    assert sorted(report.split()[-1] for report in reports) == sorted(urls)


def test_fetchall_empty():
    assert list(fetchall([])) == []


def test_fetch_main_prints_body(base_url, capsysbinary):
    assert fetch_main([base_url + "/x"]) == 0
    assert capsysbinary.readouterr().out == b"hello from /x"


def test_fetch_main_stream(base_url, capsysbinary):
    assert fetch_main(["--stream", base_url + "/y"]) == 0
    assert capsysbinary.readouterr().out == b"hello from /y"


def test_fetch_main_status_with_prefix(base_url, capsysbinary):
    bare = base_url[len("http://"):] + "/missing"
    assert fetch_main(["--prefix", "--status", bare]) == 0
    out = capsysbinary.readouterr().out
    assert out.startswith(b"http status code: 404 ")
    assert out.endswith(b"\nbody:\n" + MISSING_BODY)


def test_fetch_main_error_exits_one(dead_url, capsysbinary):
    assert fetch_main([dead_url]) == 1
    assert capsysbinary.readouterr().err.startswith(b"fetch: ")


def test_fetchall_main_prints_elapsed(base_url, capsys):
    assert fetchall_main([base_url + "/p", base_url + "/q"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[-1].endswith("s elapsed")