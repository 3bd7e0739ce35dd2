class Options:
    NONE = 0
    LEXER = 1  # Stop after the lexer
    LOG = 2  # Show the rich TUI
    PARSER = 4  # Stop after the parser
    TRACE = 8  # Log every evaluation step
    SAMPLE = 16  # Run the built-in sample program

    def __init__(self, value: int = NONE) -> None:
        self.value = value

    def __or__(self, other: "Options | int") -> "Options":
        return Options(self.value | int(other))

    def __and__(self, other: "Options | int") -> int:
        return self.value & int(other)

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __contains__(self, flag: int) -> bool:
        return bool(self.value & flag)

    def __repr__(self) -> str:
        return f"Options({self.value})"


# Flag spellings accepted on the command line.
FLAGS: dict[str, int] = {
    "-l": Options.LEXER,
    "--lexer": Options.LEXER,
    "-p": Options.PARSER,
    "--parser": Options.PARSER,
    "-!": Options.LOG,
    "--log": Options.LOG,
    "-t": Options.TRACE,
    "--trace": Options.TRACE,
    "-s": Options.SAMPLE,
    "--sample": Options.SAMPLE,
}
