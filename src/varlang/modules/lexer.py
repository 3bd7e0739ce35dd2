import re
from typing import Callable

from varlang.utils.istream import InputStream, TuiInputStream
from varlang.utils.utils import silent


class Tags:
    """Token classes. Only used to render tokens for diagnostics."""

    NUM = "NUM"
    REAL = "REAL"
    ID = "ID"
    VAR = "VAR"
    TYPE = "TYPE"


KEYWORDS = {"var": Tags.VAR}
TYPES = ("int", "float")

# Alternatives are tried left to right, the first one that matches wins.
# Keywords and type tags only match whole words so `variable` stays one
# identifier. Floats come before word runs so `3.14` stays one token, and
# integers are word runs, so `10abc` is one (invalid) token. ASCII only.
TOKEN_PATTERN = re.compile(
    r"""\s*(
        =>
        | [{}]
        | var\b
        | :
        | (?:int|float)\b
        | [-+/*=]
        | \d+\.\d+
        | \w+
        | \S
    )\s*""",
    re.VERBOSE | re.ASCII,
)

INT_PATTERN = re.compile(r"^\d+$", re.ASCII)
FLOAT_PATTERN = re.compile(r"^\d+\.\d+$", re.ASCII)
IDENT_PATTERN = re.compile(r"^[a-zA-Z]\w*$", re.ASCII)


def classify(token: str) -> str | None:
    """Returns the tag of a token, or `None` for punctuation and operators."""
    if token in KEYWORDS:
        return KEYWORDS[token]
    if token in TYPES:
        return Tags.TYPE
    if INT_PATTERN.match(token):
        return Tags.NUM
    if FLOAT_PATTERN.match(token):
        return Tags.REAL
    if IDENT_PATTERN.match(token):
        return Tags.ID
    return None


def describe(token: str) -> str:
    """Renders a token the way the lexer log prints it: `<ID, a>`, `<':'>`."""
    tag = classify(token)
    if tag is None:
        return f"<'{token}'>"
    if tag == Tags.VAR:
        return f"<{tag}>"
    return f"<{tag}, {token}>"


class Lexer:
    def __init__(
        self,
        istream: InputStream | TuiInputStream,
        logger: Callable[..., None] = silent,
    ):
        self._istream = istream
        self._log = logger
        self._tokens: list[str] = []

    def scan(self) -> str | None:
        """Returns the next token, or `None` once the input is exhausted."""
        m = self._istream.match(TOKEN_PATTERN)
        if m is None:
            return None

        token = m.group(1)
        self._tokens.append(token)
        self._log(f"{describe(token)} ", end="")
        if token == ";":
            self._log()
        return token

    def start(self) -> list[str]:
        """Scans the whole stream."""
        while not self._istream.eof_reached:
            self.scan()
        self.finish()
        return self.tokens()

    def finish(self):
        if self._tokens and self._tokens[-1] != ";":
            self._log()

    def tokens(self) -> list[str]:
        return list(self._tokens)


def lex(source: str) -> list[str]:
    """Splits `source` into token strings. Never fails."""
    return Lexer(InputStream(source)).start()
