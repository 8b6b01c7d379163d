from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Iterator, Optional, Tuple

from minijs.util import Span


@dataclass(frozen=True)
class Node:
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    @property
    def type(self) -> str:
        return self.__class__.__name__

    def __str__(self) -> str:
        from minijs.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def __contains__(self, element: Node) -> bool:
        if self == element:
            return True
        return any(
            element in child
            for _field_name, value in self.iter_fields()
            for child in (value if isinstance(value, tuple) else (value,))
            if isinstance(child, Node)
        )

    def iter_fields(self) -> Iterator[Tuple[str, Any]]:
        # Yield the dataclass fields, except for the position information
        for _field in fields(self):
            if _field.name != "span":
                yield _field.name, getattr(self, _field.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert this tree into nested ESTree-style dictionaries."""

        def convert(value):
            if isinstance(value, Node):
                return value.to_dict()
            if isinstance(value, tuple):
                return [convert(item) for item in value]
            return value

        return {
            "type": self.type,
            **{name: convert(value) for name, value in self.iter_fields()},
        }


@dataclass(frozen=True)
class Program(Node):
    body: Tuple[Statement, ...]


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class Literal(Node):
    value: int | float | str | bool | None
    raw: str


@dataclass(frozen=True)
class VariableDeclarator(Node):
    id: Identifier
    init: Optional[Expression]


@dataclass(frozen=True)
class VariableDeclaration(Node):
    kind: str
    declarations: Tuple[VariableDeclarator, ...]


@dataclass(frozen=True)
class BlockStatement(Node):
    body: Tuple[Statement, ...]


@dataclass(frozen=True)
class FunctionDeclaration(Node):
    id: Identifier
    params: Tuple[Identifier, ...]
    body: BlockStatement


@dataclass(frozen=True)
class ReturnStatement(Node):
    argument: Optional[Expression]


@dataclass(frozen=True)
class IfStatement(Node):
    test: Expression
    consequent: Statement
    alternate: Optional[Statement]


@dataclass(frozen=True)
class ExpressionStatement(Node):
    expression: Expression


@dataclass(frozen=True)
class BinaryExpression(Node):
    operator: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class UnaryExpression(Node):
    operator: str
    prefix: bool = field(default=True, kw_only=True)
    argument: Expression


@dataclass(frozen=True)
class AssignmentExpression(Node):
    operator: str = field(default="=", kw_only=True)
    left: Expression
    right: Expression


@dataclass(frozen=True)
class CallExpression(Node):
    callee: Expression
    arguments: Tuple[Expression, ...]


@dataclass(frozen=True)
class MemberExpression(Node):
    object: Expression
    property: Expression
    computed: bool


@dataclass(frozen=True)
class ArrayExpression(Node):
    elements: Tuple[Expression, ...]


Statement = (
    VariableDeclaration
    | FunctionDeclaration
    | BlockStatement
    | ReturnStatement
    | IfStatement
    | ExpressionStatement
)

Expression = (
    Identifier
    | Literal
    | BinaryExpression
    | UnaryExpression
    | AssignmentExpression
    | CallExpression
    | MemberExpression
    | ArrayExpression
)
