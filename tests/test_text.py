import io
import sys

import pytest

from minitools.text import (
    anagram_main,
    args_main,
    basename,
    basename_main,
    comma,
    comma_main,
    echo_main,
    hello_main,
    ints_to_string,
    is_anagram,
    join_args,
    time_join_methods,
)

BENCH_ARGS = ["cmd", "arg1", "arg2", "arg3", "arg4", "arg5"]


@pytest.mark.parametrize(
    "path, expected",
    [("a", "a"), ("a.go", "a"), ("a/b/c.go", "c"), ("a/b.c.go", "b.c"), ("", "")],
)
def test_basename(path, expected):
    assert basename(path) == expected


def test_basename_hidden_file_loses_everything():
    assert basename("dir/.bashrc") == ""


@pytest.mark.parametrize(
    "digits, expected",
    [("1", "1"), ("123", "123"), ("1234", "1,234"), ("10000", "10,000"),
     ("1234567", "1,234,567")],
)
def test_comma(digits, expected):
    assert comma(digits) == expected


def test_ints_to_string():
    assert ints_to_string([1, 2, 3]) == "[1, 2, 3]"
    assert ints_to_string([]) == "[]"


@pytest.mark.parametrize(
    "s1, s2, expected",
    [("listen", "silent", True), ("aab", "abb", False), ("abc", "ab", False),
     ("日本語", "語日本", True), ("", "", True)],
)
def test_is_anagram(s1, s2, expected):
    assert is_anagram(s1, s2) is expected


def test_join_args():
    assert join_args(BENCH_ARGS[1:]) == "arg1 arg2 arg3 arg4 arg5"
    assert join_args(["a", "b"], ",") == "a,b"


def test_time_join_methods():
    timings = time_join_methods(BENCH_ARGS)
    assert [t.method for t in timings] == [1, 2, 3]
    assert timings[0].text == "arg1 arg2 arg3 arg4 arg5"
    assert timings[1].text == "arg1 arg2 arg3 arg4 arg5"
    assert timings[2].text == "cmd arg1 arg2 arg3 arg4 arg5"
    assert all(t.nanoseconds >= 0 for t in timings)


def test_time_join_methods_program_only():
    timings = time_join_methods(["cmd"])
    assert [t.text for t in timings] == ["", "", "cmd"]


def test_echo_default(capsys):
    assert echo_main(["a", "b"]) == 0
    assert capsys.readouterr().out == "a b\n"


def test_echo_flags(capsys):
    echo_main(["-n", "-s", ",", "a", "b"])
    assert capsys.readouterr().out == "a,b"
    echo_main(["-s=:", "x", "y"])
    assert capsys.readouterr().out == "x:y\n"


def test_echo_flags_stop_at_first_argument(capsys):
    echo_main(["a", "-n"])
    assert capsys.readouterr().out == "a -n\n"


def test_echo_unknown_flag(capsys):
    assert echo_main(["-x"]) == 2
    assert "flag provided but not defined: -x" in capsys.readouterr().err


def test_basename_main(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a/b.c.go\r\nx.go\n"))
    basename_main([])
    assert capsys.readouterr().out == "b.c\nx\n"


def test_comma_main(capsys):
    comma_main(["1234", "12"])
    assert capsys.readouterr().out == " 1,234\n 12\n"


def test_anagram_main(capsys):
    anagram_main(["abc", "cab"])
    anagram_main(["abc", "abd"])
    assert capsys.readouterr().out == (
        "abc and cab is anagram\nabc and abd is not anagram\n"
    )


def test_anagram_main_needs_two_arguments(capsys):
    assert anagram_main(["abc"]) == 0
    assert capsys.readouterr().out == ""


def test_hello_main(capsys):
    hello_main([])
    assert capsys.readouterr().out == "Hello, World!\n"


def test_args_main_index(capsys):
    args_main(["x", "y"])
    assert capsys.readouterr().out == "idx: 0, arg: x\nidx: 1, arg: y\n"


def test_args_main_with_program(capsys):
    args_main(["--with-program", "x", "y"])
    assert capsys.readouterr().out == f"{sys.argv[0]} x y\n"


def test_args_main_timing(capsys):
    args_main(["--timing", "x", "y"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "x y"
    assert lines[2] == "x y"
    assert lines[4] == f"{sys.argv[0]} x y"
    assert lines[1].startswith("Total Runtime | Method 1:  ")
    assert lines[5].endswith(" nanoseconds")