import logging
from typing import List

from .errors import ParseError
from .lexer import Token, PAREN, STRING, NUMBER, NAME
from .source_ast import Program, CallExpression, NumberLiteral, StringLiteral, Node

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# Parser
# ----------------------------------------------------------------------

class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def current(self) -> Token:
        if self.at_end():
            raise ParseError("Unexpected end of input")
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.current()
        self.pos += 1
        return tok

    def is_close(self) -> bool:
        tok = self.current()
        return tok.type == PAREN and tok.value == ')'

    def parse(self) -> Program:
        """Parse every top-level form until the tokens run out"""
        program = Program()
        while not self.at_end():
            program.body.append(self.walk())
        logger.debug("parsed %d top-level forms", len(program.body))
        return program

    def walk(self) -> Node:
        """Parse one form: a literal or ( name form* )

        Each level of nesting costs a single Python frame.
        """
        tok = self.advance()

        if tok.type == NUMBER:
            return NumberLiteral(tok.value)

        elif tok.type == STRING:
            return StringLiteral(tok.value)

        elif tok.type == PAREN and tok.value == '(':
            name = self.current()
            if name.type != NAME:
                raise ParseError(f"Expected call name, got {name.type} ({name.value!r})", name)
            self.advance()
            node = CallExpression(name.value)
            while not self.is_close():
                node.params.append(self.walk())
            self.advance()  # skip )
            return node

        else:
            raise ParseError(f"Unexpected token: {tok.type} ({tok.value!r})", tok)


def parse(tokens: List[Token]) -> Program:
    try:
        return Parser(tokens).parse()
    except RecursionError as e:
        raise ParseError("Input is nested too deeply to parse") from e
