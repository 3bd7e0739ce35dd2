"""Lexer, parser and evaluator for a tiny typed expression language."""

from varlang.modules.evaluator import Environment, EvaluationError, Evaluator, evaluate
from varlang.modules.lexer import Lexer, lex
from varlang.modules.parser import ParseError, Parser, parse

__version__ = "0.1.0"


def run(source: str) -> Environment:
    """source text -> tokens -> AST -> final environment."""
    return evaluate(parse(lex(source)))


__all__ = [
    "Environment",
    "EvaluationError",
    "Evaluator",
    "Lexer",
    "ParseError",
    "Parser",
    "evaluate",
    "lex",
    "parse",
    "run",
]
