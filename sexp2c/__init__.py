"""S-expression to C-style call syntax compiler."""

from .codegen import CodeGenerator, generate
from .compiler import transpile
from .errors import CompileError, LexError, ParseError, TraverseError, CodegenError
from .lexer import Token, tokenize
from .parser import Parser, parse
from .transformer import transform
from .traverser import traverse

__all__ = [
    'CodeGenerator', 'generate', 'transpile',
    'CompileError', 'LexError', 'ParseError', 'TraverseError', 'CodegenError',
    'Token', 'tokenize', 'Parser', 'parse', 'transform', 'traverse',
]
