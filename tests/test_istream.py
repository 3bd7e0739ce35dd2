import re

from varlang.utils.istream import InputStream, TuiInputStream


def test_match_advances_past_the_match():
    stream = InputStream("ab12")
    assert stream.match(re.compile(r"[a-z]+")).group(0) == "ab"
    assert stream.match(re.compile(r"\d+")).group(0) == "12"
    assert not stream.eof_reached


def test_failed_match_flags_eof():
    stream = InputStream("12")
    assert stream.match(re.compile(r"[a-z]+")) is None
    assert stream.eof_reached


def test_from_file(source_file):
    path = source_file("var a: int;\n")
    stream = InputStream.from_file(path)
    assert stream.source == "var a: int;\n"


def test_tui_stream_from_file_echoes(source_file):
    echoed = []
    stream = TuiInputStream.from_file(source_file("a b"), echoed.append)
    stream.match(re.compile(r"\w+\s*"))
    assert echoed == ["a "]
