"""Exceptions raised by the compiler stages.

Every stage raises a subclass of CompileError; the first error aborts the
whole compilation.
"""


class CompileError(Exception):
    pass


class LexError(CompileError):
    def __init__(self, message: str, char: str, pos: int):
        super().__init__(message)
        self.char = char
        self.pos = pos


class ParseError(CompileError):
    def __init__(self, message: str, token=None):
        super().__init__(message)
        self.token = token  # None when the input ended early


class TraverseError(CompileError):
    def __init__(self, node, message: str = None):
        super().__init__(message or f"Unknown node type: {type(node).__name__}")
        self.node = node


class CodegenError(CompileError):
    def __init__(self, node, message: str = None):
        super().__init__(message or f"Unknown node type: {type(node).__name__}")
        self.node = node
