import pytest

from varlang.compiler import parse_options
from varlang.utils.options import Options


def test_flags_combine():
    options, positional = parse_options(["prog.vl", "-l", "--trace"])
    assert positional == ["prog.vl"]
    assert options & Options.LEXER
    assert options & Options.TRACE
    assert not options & Options.LOG
    assert Options.TRACE in options


def test_no_flags():
    options, positional = parse_options(["prog.vl"])
    assert not options
    assert int(options) == Options.NONE


def test_unknown_flag():
    with pytest.raises(KeyError):
        parse_options(["--nope"])
