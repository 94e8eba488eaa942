"""Reshape the source AST into the target AST.

The destination list each translated node is appended to travels down the
traversal as the hook context; nothing is written onto the source nodes.
"""

from typing import List

from . import source_ast as src
from . import target_ast as dst
from .errors import TraverseError
from .traverser import traverse


def enter(node: src.Node, parent: src.Node, context: List[dst.Node]):
    if isinstance(node, src.Program):
        return context

    if isinstance(node, src.NumberLiteral):
        context.append(dst.NumberLiteral(node.value))

    elif isinstance(node, src.StringLiteral):
        context.append(dst.StringLiteral(node.value))

    elif isinstance(node, src.CallExpression):
        expression = dst.CallExpression(dst.Identifier(node.name), [])
        # Top-level calls are statements, nested ones are argument values
        if isinstance(parent, src.Program):
            context.append(dst.ExpressionStatement(expression))
        else:
            context.append(expression)
        return expression.arguments

    return None


def transform(program: src.Program) -> dst.Program:
    new_program = dst.Program()
    try:
        traverse(program, enter, context=new_program.body)
    except RecursionError as e:
        raise TraverseError(program, "Tree is nested too deeply to transform") from e
    return new_program
