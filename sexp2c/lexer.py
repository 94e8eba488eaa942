from dataclasses import dataclass
from typing import List

from .errors import LexError

# ----------------------------------------------------------------------
# Tokens
# ----------------------------------------------------------------------

PAREN = 'PAREN'
STRING = 'STRING'
NUMBER = 'NUMBER'
NAME = 'NAME'

# Same class as a JavaScript \s
WHITESPACE = frozenset(
    " \t\n\v\f\r\u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200b))
)


@dataclass
class Token:
    type: str
    value: str
    pos: int = 0  # position in source


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_space(c: str) -> bool:
    return c in WHITESPACE


def is_letter(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z'


def tokenize(source: str) -> List[Token]:
    tokens = []
    i = 0

    while i < len(source):
        c = source[i]

        # Parentheses
        if c == '(' or c == ')':
            tokens.append(Token(PAREN, c, i))
            i += 1
            continue

        # Skip whitespace
        if is_space(c):
            i += 1
            while i < len(source) and is_space(source[i]):
                i += 1
            continue

        # String literals (no escapes, quotes are not part of the value)
        if c == '"':
            start = i
            j = source.find('"', i + 1)
            if j < 0:
                raise LexError(f"Unterminated string starting at position {start}", c, start)
            tokens.append(Token(STRING, source[i+1:j], start))
            i = j + 1
            continue

        # Numbers (digits only)
        if is_digit(c):
            start = i
            while i < len(source) and is_digit(source[i]):
                i += 1
            tokens.append(Token(NUMBER, source[start:i], start))
            continue

        # Names (letters only)
        if is_letter(c):
            start = i
            while i < len(source) and is_letter(source[i]):
                i += 1
            tokens.append(Token(NAME, source[start:i], start))
            continue

        raise LexError(f"Unexpected character: {c!r} at position {i}", c, i)

    return tokens
