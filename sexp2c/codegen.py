from . import target_ast as ast
from .errors import CodegenError

# ----------------------------------------------------------------------
# Code Generator
# ----------------------------------------------------------------------

class CodeGenerator:
    def generate(self, node: ast.Node) -> str:
        """Render a target AST node as C-style source text"""
        if isinstance(node, ast.Program):
            lines = []
            for stmt in node.body:
                lines.append(self.generate(stmt))
            return '\n'.join(lines)

        elif isinstance(node, ast.ExpressionStatement):
            return f"{self.generate(node.expression)};"

        elif isinstance(node, ast.CallExpression):
            # Rendered inline so each nested call costs one frame
            args = []
            for arg in node.arguments:
                args.append(self.generate(arg))
            return f"{self.generate(node.callee)}({', '.join(args)})"

        elif isinstance(node, ast.Identifier):
            return node.name

        elif isinstance(node, ast.NumberLiteral):
            return node.value

        elif isinstance(node, ast.StringLiteral):
            # Embedded quotes are emitted as-is
            return f'"{node.value}"'

        else:
            raise CodegenError(node)


def generate(node: ast.Node) -> str:
    try:
        return CodeGenerator().generate(node)
    except RecursionError as e:
        raise CodegenError(node, "Tree is nested too deeply to render") from e
