"""Generic depth-first walk over a source AST.

Hooks are plain callables ``hook(node, parent, context)``. Whatever the
enter hook returns becomes the context handed to the node's children; if
there is no enter hook, or it returns None, the children receive the
node's own context. The exit hook runs after all children and its return
value is ignored.
"""

from typing import Any, Callable, Optional

from .errors import TraverseError
from .source_ast import Program, CallExpression, NumberLiteral, StringLiteral, Node

Hook = Callable[[Node, Optional[Node], Any], Any]


def traverse(node: Node, enter: Optional[Hook] = None, exit: Optional[Hook] = None,
             parent: Optional[Node] = None, context: Any = None) -> None:
    child_context = context
    if enter is not None:
        result = enter(node, parent, context)
        if result is not None:
            child_context = result

    if isinstance(node, Program):
        children = node.body
    elif isinstance(node, CallExpression):
        children = node.params
    elif isinstance(node, (NumberLiteral, StringLiteral)):
        children = []
    else:
        raise TraverseError(node)

    for child in children:
        traverse(child, enter, exit, node, child_context)

    if exit is not None:
        exit(node, parent, context)
