#!/usr/bin/env python3
import enum
from pprint import pformat
from typing import Callable, List, Optional, Sequence

from varlang.modules.ast import (
    BinaryExpression,
    FloatLiteral,
    NumberLiteral,
    Program,
    Statement,
    Variable,
    VariableDeclaration,
)
from varlang.modules.lexer import FLOAT_PATTERN, IDENT_PATTERN, INT_PATTERN
from varlang.utils.utils import silent

OPERATORS = ("-", "+", "/", "*", "=")


# Definimos uma exceção personalizada para evitar confusão
# com o "SyntaxError" nativo do Python
class ParseError(Exception):
    class Kind(enum.Enum):
        MISSING_COLON = "missing colon"
        UNEXPECTED_TOKEN = "unexpected token"
        UNEXPECTED_END = "unexpected end of input"

    def __init__(self, kind: "ParseError.Kind", token: str | None, message: str):
        super().__init__(message)
        self.kind = kind
        self.token = token


class Parser:
    """Recursive-descent parser over a list of token strings.

    The cursor only moves forward. One instance parses one token list.
    """

    def __init__(
        self,
        tokens: Sequence[str],
        logger: Callable[..., None] = silent,
        warn_logger: Callable[..., None] = silent,
    ):
        self._tokens = list(tokens)
        self._current = 0
        self._log = logger
        self._warn = warn_logger

    @property
    def _lookahead(self) -> str | None:
        if self._current < len(self._tokens):
            return self._tokens[self._current]
        return None

    def start(self) -> Program:
        """Parses every statement and returns the complete AST."""
        ast_root = self.program()

        self._log("=" * 40)
        self._log("AST:")
        self._log("=" * 40)
        self._log(pformat(ast_root, indent=2, width=80))
        return ast_root

    def program(self) -> Program:
        """
        Regra:
            program -> { stmt }
        """
        body: List[Statement] = []
        while self._lookahead is not None:
            node = self.parse_expression()
            if node is None:
                continue
            if not isinstance(node, VariableDeclaration) and not (
                isinstance(node, BinaryExpression) and node.operator == "="
            ):
                self._warn(
                    f"[warning] standalone expression at statement {len(body) + 1}."
                )
            body.append(node)
        return Program(body=body)

    def parse_expression(self) -> Optional[Statement]:
        """
        Regras:
            expr -> NUM | REAL | var_decl | ID [ oper expr ] | ;
        """
        token = self.advance()

        if INT_PATTERN.match(token):
            return NumberLiteral(value=int(token))

        if FLOAT_PATTERN.match(token):
            return FloatLiteral(value=float(token))

        if token == "var":
            return self.var_decl()

        if IDENT_PATTERN.match(token):
            variable = Variable(name=token.strip())
            if self._lookahead in OPERATORS:
                return self.parse_binary_expression(variable)
            return variable

        # Produção vazia
        if token == ";":
            return None

        raise ParseError(
            ParseError.Kind.UNEXPECTED_TOKEN, token, f"Unexpected token '{token}'"
        )

    def var_decl(self) -> VariableDeclaration:
        """Regra: var <id> : <type>

        The type tag is taken as-is, `int` and `float` are not enforced.
        """
        name = self.advance().strip()
        self.match(":")
        data_type = self.advance()
        return VariableDeclaration(name=name, data_type=data_type)

    def parse_binary_expression(self, left: Variable) -> BinaryExpression:
        """Regra: oper expr [;]

        The right side is a full expression, so chains nest to the right:
        `a - b - c` parses as `a - (b - c)`.
        """
        operator = self.advance().strip()

        right = self.parse_expression()
        if right is None:
            # the right side was a bare ';'
            raise ParseError(
                ParseError.Kind.UNEXPECTED_TOKEN, ";", "Unexpected token ';'"
            )
        if isinstance(right, VariableDeclaration):
            raise ParseError(
                ParseError.Kind.UNEXPECTED_TOKEN,
                "var",
                f"Unexpected token 'var' after '{operator}'",
            )

        # O ';' final é consumido pela expressão mais interna
        if self._lookahead == ";":
            self.advance()

        return BinaryExpression(left=left, operator=operator, right=right)

    def advance(self) -> str:
        """Returns the current token and moves past it."""
        token = self._lookahead
        if token is None:
            raise ParseError(
                ParseError.Kind.UNEXPECTED_END, None, "Unexpected end of input"
            )
        self._current += 1
        return token

    def match(self, expected: str):
        """Verifica se o token atual corresponde ao esperado e avança."""
        if self._lookahead != expected:
            if self._lookahead is None:
                raise ParseError(
                    ParseError.Kind.UNEXPECTED_END,
                    None,
                    f"Expected '{expected}' but reached end of input",
                )
            raise ParseError(
                ParseError.Kind.MISSING_COLON
                if expected == ":"
                else ParseError.Kind.UNEXPECTED_TOKEN,
                self._lookahead,
                f"Expected '{expected}' but got '{self._lookahead}'",
            )
        self._current += 1


def parse(tokens: Sequence[str]) -> Program:
    """Builds the `Program` AST for `tokens`. Raises `ParseError`."""
    return Parser(tokens).program()

