from typing import Any

from minijs.tree.tree import Node


class YieldVisitor:
    """
    For yielding values from nodes in our AST.

    `visit` dispatches to `visit_<ClassName>` of whatever it is given: nodes,
    tuples of nodes, `None` or scalar field values. Without such a method,
    `visit_children` is used.
    """

    def visit(self, node: Node | Any, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        yield from visitor(node, *args, **kwargs)

    def visit_children(self, node: Node | Any, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        if not isinstance(node, Node):
            return
        for _field, value in node.iter_fields():
            if isinstance(value, tuple):
                for item in value:
                    if isinstance(item, Node):
                        yield from self.visit(item, *args, **kwargs)

            elif isinstance(value, Node):
                yield from self.visit(value, *args, **kwargs)
