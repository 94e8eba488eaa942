"""Source AST: the shape of the S-expression input."""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass
class NumberLiteral:
    value: str


@dataclass
class StringLiteral:
    value: str


@dataclass
class CallExpression:
    name: str
    params: List['Node'] = field(default_factory=list)


@dataclass
class Program:
    body: List['Node'] = field(default_factory=list)


Node = Union[Program, CallExpression, NumberLiteral, StringLiteral]
