import logging

from .codegen import generate
from .lexer import tokenize
from .parser import parse
from .transformer import transform

logger = logging.getLogger(__name__)


def transpile(source: str) -> str:
    """Compile S-expression source to C-style call syntax.

    Each top-level form becomes one line ending in a semicolon.
    """
    tokens = tokenize(source)
    logger.debug("tokenized %d characters into %d tokens", len(source), len(tokens))
    ast = parse(tokens)
    new_ast = transform(ast)
    output = generate(new_ast)
    logger.debug("generated %d lines, %d characters", len(new_ast.body), len(output))
    return output
