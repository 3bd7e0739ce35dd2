"""
Pytest fixtures shared by the varlang tests.
"""

import pytest

from varlang.compiler import SAMPLE_PROGRAM


DECLARATIONS = """
var a: int;
var b: int;
var sum: int;
var difference: int;
var product: int;
var quotient: float;
"""


@pytest.fixture
def sample_source():
    """The built-in sample program."""
    return SAMPLE_PROGRAM


@pytest.fixture
def declarations():
    """Declares every name the sample program uses."""
    return DECLARATIONS


@pytest.fixture
def source_file(tmp_path):
    """Writes source text to a temporary file and returns its path."""

    def write(text: str, name: str = "program.vl") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write
