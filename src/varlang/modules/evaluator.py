#!/usr/bin/env python3
"""Tree-walking evaluator."""
import enum
import operator
from pprint import pformat
from typing import Callable, Dict, Union

from varlang.modules.ast import (
    ASTNode,
    BinaryExpression,
    FloatLiteral,
    NumberLiteral,
    Program,
    Variable,
    VariableDeclaration,
)
from varlang.modules.symbols import Symbol, SymTable
from varlang.utils.utils import silent

Value = Union[int, float]
Environment = Dict[str, Value]

# `/` is true division: int / int gives a float, x / 0 raises ZeroDivisionError.
ARITHMETIC: Dict[str, Callable[[Value, Value], Value]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class EvaluationError(Exception):
    class Kind(enum.Enum):
        UNKNOWN_OPERATOR = "unknown operator"
        UNKNOWN_NODE_TYPE = "unknown node type"
        UNDECLARED_VARIABLE = "undeclared variable"
        INVALID_OPERAND = "invalid operand"
        INVALID_TARGET = "invalid assignment target"

    def __init__(self, kind: "EvaluationError.Kind", detail: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.detail = detail


class Evaluator:
    """Runs a `Program` against one fresh, flat environment."""

    def __init__(self, logger: Callable[..., None] = silent, trace: bool = False):
        self.env: Environment = {}
        self._sym_table = SymTable()
        self._log = logger
        self._trace = trace

    def start(self, program: Program) -> Environment:
        self.evaluate(program)
        if self._trace:
            self._log(f"Final environment: {pformat(self.env, indent=2, width=80)}")
        return self.env

    def evaluate(self, node: ASTNode):
        if self._trace:
            self._log(f"Current node: {pformat(node, indent=2, width=80)}")
            self._log(f"Current environment: {pformat(self.env, indent=2, width=80)}")

        if isinstance(node, Program):
            return [self.evaluate(statement) for statement in node.body]

        if isinstance(node, VariableDeclaration):
            symbol = Symbol(node.name, node.data_type)
            self._sym_table.insert(node.name, symbol)
            # Redeclaring resets the variable
            self.env[node.name] = symbol.zero()
            return self.env

        if isinstance(node, BinaryExpression):
            return self.binary_expression(node)

        if isinstance(node, (NumberLiteral, FloatLiteral)):
            return node.value

        if isinstance(node, Variable):
            return self.lookup(node.name)

        kind = type(node).__name__
        raise EvaluationError(
            EvaluationError.Kind.UNKNOWN_NODE_TYPE, kind, f"Unknown node type: {kind}"
        )

    def binary_expression(self, node: BinaryExpression):
        if node.operator == "=":
            if not isinstance(node.left, Variable):
                kind = type(node.left).__name__
                raise EvaluationError(
                    EvaluationError.Kind.INVALID_TARGET,
                    kind,
                    f"Cannot assign to {kind}",
                )
            # a nested assignment yields the environment and is rejected here
            self.env[node.left.name] = self.operand(node.right)
            return self.env

        apply = ARITHMETIC.get(node.operator)
        if apply is None:
            raise EvaluationError(
                EvaluationError.Kind.UNKNOWN_OPERATOR,
                node.operator,
                f"Unknown operator: {node.operator}",
            )

        left = self.operand(node.left)
        right = self.operand(node.right)
        return apply(left, right)

    def operand(self, node: ASTNode) -> Value:
        value = self.evaluate(node)
        # bool is excluded, an assignment yields the environment
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EvaluationError(
                EvaluationError.Kind.INVALID_OPERAND,
                type(node).__name__,
                f"Operand is not a number: {type(value).__name__}",
            )
        return value

    def lookup(self, name: str) -> Value:
        """Current value of `name`. Zero and unbound are told apart."""
        if name not in self.env:
            raise EvaluationError(
                EvaluationError.Kind.UNDECLARED_VARIABLE,
                name,
                f"Undeclared variable: {name}",
            )
        return self.env[name]

    def declared_type(self, name: str) -> str | None:
        symbol = self._sym_table.find(name)
        return symbol.type if symbol is not None else None


def evaluate(program: Program) -> Environment:
    """Evaluates `program` in a new environment and returns that environment."""
    evaluator = Evaluator()
    evaluator.evaluate(program)
    return evaluator.env
