#!/usr/bin/env python3
"""
Usage: varlang <source_file> [options]
       varlang --sample [options]
    @option [-?|--help] show help
    @option [-!|--log] show every stage in the TUI
    @option [-l|--lexer] stop after the lexer, print the tokens
    @option [-p|--parser] stop after the parser, print the AST
    @option [-t|--trace] log every evaluation step
    @option [-s|--sample] run the built-in sample program
"""

import sys
from pprint import pformat
from typing import Callable

from varlang.modules.evaluator import Environment, EvaluationError, Evaluator
from varlang.modules.lexer import Lexer
from varlang.modules.parser import ParseError, Parser
from varlang.utils.istream import InputStream, TuiInputStream
from varlang.utils.options import FLAGS, Options
from varlang.utils.utils import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    log,
    log_error,
    log_info,
    log_success,
    log_warning,
    silent,
)

SAMPLE_PROGRAM = """
var a: int;
var b: int;
var sum: int;
var difference: int;
var product: int;
var quotient: float;

a = 10;
b = 5;

sum = a + b;
difference = a - b;
product = a * b;
quotient = a / b;
"""

# Names the sample program computes.
SAMPLE_RESULTS = ("sum", "difference", "product", "quotient")


def show_help():
    print(
        "\033[34m"
        "Usage: varlang <source_file> [-!|--log] [-l|--lexer] [-p|--parser] [-t|--trace]\n"
        "       varlang -s|--sample [options]\n"
        "\t[-?|--help] show this help\n"
        "\t[-!|--log] show every stage in the TUI\n"
        "\t[-l|--lexer] stop after the lexer, print the tokens\n"
        "\t[-p|--parser] stop after the parser, print the AST\n"
        "\t[-t|--trace] log every evaluation step\n"
        "\t[-s|--sample] run the built-in sample program\n"
        "\033[m"
    )


def parse_options(argv: list[str]) -> tuple[Options, list[str]]:
    """Splits argv into option flags and positional arguments.

    Raises `KeyError` for an unknown flag.
    """
    options = Options()
    positional = []
    for arg in argv:
        if arg in FLAGS:
            options = options | FLAGS[arg]
        elif arg.startswith("-") and arg != "-":
            raise KeyError(arg)
        else:
            positional.append(arg)
    return options, positional


def format_environment(env: Environment, evaluator: Evaluator) -> str:
    lines = []
    for name, value in env.items():
        data_type = evaluator.declared_type(name) or "?"
        lines.append(f"{name}: {data_type} = {value!r}")
    return "\n".join(lines)


def run_pipeline(
    istream: InputStream,
    options: Options,
    token_log: Callable[..., None] = silent,
    ast_log: Callable[..., None] = silent,
    env_log: Callable[..., None] = silent,
    trace_log: Callable[..., None] = silent,
    warn_log: Callable[..., None] = silent,
) -> Environment | None:
    """Runs the stages `options` asks for.

    Returns the final environment, or `None` when stopped early.
    """
    lexer = Lexer(istream, token_log)
    tokens = lexer.start()
    if options & Options.LEXER:
        env_log(f"Tokens: {tokens}")
        return None

    ast = Parser(tokens, ast_log, warn_log).start()
    if options & Options.PARSER:
        return None

    evaluator = Evaluator(trace_log, trace=bool(options & Options.TRACE))
    env = evaluator.start(ast)
    env_log(format_environment(env, evaluator))
    return env


def read_source(options: Options, positional: list[str]) -> InputStream:
    if options & Options.SAMPLE:
        return InputStream(SAMPLE_PROGRAM)
    return InputStream.from_file(positional[0])


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if any(arg in ("-?", "--help") for arg in argv):
        show_help()
        return EXIT_SUCCESS

    try:
        options, positional = parse_options(argv)
    except KeyError as e:
        log_error(f"Error: unknown option {e.args[0]}")
        show_help()
        return EXIT_ERROR

    if not positional and not options & Options.SAMPLE:
        log_error("Error: No file name provided")
        show_help()
        return EXIT_ERROR

    try:
        istream = read_source(options, positional)
    except FileNotFoundError:
        log_error(f"Error: The file '{positional[0]}' was not found.")
        return EXIT_ERROR

    try:
        if options & Options.LOG:
            env = run_tui(istream.source, options)
        else:
            env = run_pipeline(
                istream,
                options,
                token_log=log if options & Options.LEXER else silent,
                ast_log=print if options & Options.PARSER else silent,
                env_log=print,
                trace_log=log,
                warn_log=log_warning,
            )
    except ParseError as e:
        log_error(f"Syntax error ({e.kind.value}): {e}")
        return EXIT_ERROR
    except EvaluationError as e:
        log_error(f"Runtime error ({e.kind.value}): {e}")
        return EXIT_ERROR
    except ZeroDivisionError as e:
        log_error(f"Runtime error: {e}")
        return EXIT_ERROR

    if env is not None and options & Options.SAMPLE:
        log_info("Result:")
        print(pformat({name: env.get(name) for name in SAMPLE_RESULTS}))
    if env is not None:
        log_success("Done.")
    return EXIT_SUCCESS


def run_tui(source: str, options: Options) -> Environment | None:
    from varlang.utils.tui import Tui

    if options & Options.LEXER:
        mode = Tui.Mode.LEXER
    elif options & Options.PARSER:
        mode = Tui.Mode.PARSER
    else:
        mode = Tui.Mode.EVAL

    ui = Tui(mode=mode)
    result: list[Environment | None] = [None]

    def task():
        istream = TuiInputStream(source, lambda text: ui.log_source(text, end=""))
        result[0] = run_pipeline(
            istream,
            options,
            token_log=ui.log_tokens,
            ast_log=ui.log_ast,
            env_log=ui.log_env if mode == Tui.Mode.EVAL else ui.log_debug,
            trace_log=ui.log_debug,
            warn_log=ui.log_debug,
        )

    ui.run(task, hold=True)
    return result[0]


if __name__ == "__main__":
    sys.exit(main())
