from dataclasses import dataclass, field
from typing import List, Union


class ASTNode:
    pass


@dataclass(frozen=True)
class NumberLiteral(ASTNode):
    value: int


@dataclass(frozen=True)
class FloatLiteral(ASTNode):
    value: float


@dataclass(frozen=True)
class Variable(ASTNode):
    name: str


@dataclass(frozen=True)
class BinaryExpression(ASTNode):
    left: "Expression"
    operator: str  # = + - * /
    right: "Expression"


@dataclass(frozen=True)
class VariableDeclaration(ASTNode):
    name: str
    data_type: str  # int | float, not validated


Expression = Union[NumberLiteral, FloatLiteral, Variable, BinaryExpression]
Statement = Union[VariableDeclaration, Expression]


# Nó raiz
@dataclass(frozen=True)
class Program(ASTNode):
    body: List[Statement] = field(default_factory=list)
