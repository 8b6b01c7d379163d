import json
from typing import Any, Iterator

from minijs.tree.tree import Node
from minijs.tree.visitor import YieldVisitor

INDENT = " " * 2


class Printer(YieldVisitor):
    """Render an AST as indented text, one node type or field per line.

    A node prints its type, followed by its fields one level deeper. Scalar
    fields are inlined in JSON notation, while node and tuple fields are
    printed on the lines below, two levels deeper than the field name:

        Program
          body:
            [
              ExpressionStatement
                expression:
                  Identifier
                    name: "x"
            ]
    """

    def print(self, tree: Node) -> str:
        return "".join(f"{line}\n" for line in self.visit(tree))

    def visit_children(self, node: Node, depth: int = 0, **kwargs) -> Iterator[str]:
        pad = INDENT * depth
        yield pad + node.type
        for name, value in node.iter_fields():
            if isinstance(value, (Node, tuple, list)):
                yield f"{pad}{INDENT}{name}:"
                yield from self.visit(value, depth=depth + 2)
            else:
                yield f"{pad}{INDENT}{name}: {self.format_scalar(value)}"

    def visit_tuple(self, node: tuple, depth: int = 0, **kwargs) -> Iterator[str]:
        pad = INDENT * depth
        yield pad + "["
        for item in node:
            yield from self.visit(item, depth=depth + 1)
        yield pad + "]"

    visit_list = visit_tuple

    def visit_NoneType(self, node: None, depth: int = 0, **kwargs) -> Iterator[str]:
        yield INDENT * depth + "null"

    def visit_scalar(self, node: Any, depth: int = 0, **kwargs) -> Iterator[str]:
        yield INDENT * depth + self.format_scalar(node)

    visit_str = visit_int = visit_float = visit_bool = visit_scalar

    @staticmethod
    def format_scalar(value: Any) -> str:
        # Numbers print like JavaScript would, i.e. 10 rather than 10.0
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return json.dumps(value, ensure_ascii=False)


def print_ast(node: Node) -> str:
    """Render `node` and its descendants as indented text."""
    return Printer().print(node)
