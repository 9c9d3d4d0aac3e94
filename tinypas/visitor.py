from typing import Any

from .ast import Node


class NodeVisitor:
    """Dispatches a node to the `visit_<classname>` method of a subclass.

    Subclasses must provide a handler for every class in `ast.NODE_TYPES`;
    the test suite checks this for each visitor.
    """

    def visit(self, node: Node) -> Any:
        method = getattr(self, 'visit_' + type(node).__name__.lower(), None)
        if method is None:
            raise TypeError(f"{type(self).__name__} cannot visit {type(node).__name__}")
        return method(node)
