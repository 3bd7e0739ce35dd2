import re
from typing import Callable


class InputStream:
    """String based input stream consumed by the lexer."""

    eof_reached = property(
        lambda self: self._eof_reached,
        None,
        None,
        "Indicates if the end of the stream has been reached.",
    )
    source = property(lambda self: self._source_code, None, None, "Whole source text.")

    def __init__(self, source_code: str):
        self._source_code = source_code
        self._position = 0  # Track the current position in the source code
        self._eof_reached = False

    @classmethod
    def from_file(cls, file_path: str, *args, **kwargs):
        """Reads the whole file and wraps its contents."""
        with open(file_path, "r", encoding="utf-8") as file:
            return cls(file.read(), *args, **kwargs)

    def match(self, pattern: re.Pattern) -> re.Match | None:
        """Matches `pattern` at the current position and advances past it.

        Returns `None` (and flags EOF) when nothing matches anymore.
        """
        m = pattern.match(self._source_code, self._position)
        if m is None or m.end() == self._position:
            self._eof_reached = True
            return None
        self._position = m.end()
        self._consumed(m.group(0))
        return m

    def _consumed(self, text: str) -> None:
        pass


class TuiInputStream(InputStream):
    """Input stream that echoes every consumed chunk to the TUI source pane."""

    def __init__(self, source_code: str, echo_func: Callable[[str], None]):
        super().__init__(source_code)
        self.echo_func = echo_func  # Function to echo characters to TUI

    def _consumed(self, text: str) -> None:
        self.echo_func(text)
