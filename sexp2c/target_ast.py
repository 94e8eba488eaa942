"""Target AST: the shape of the C-style output."""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass
class Identifier:
    name: str


@dataclass
class NumberLiteral:
    value: str


@dataclass
class StringLiteral:
    value: str


@dataclass
class CallExpression:
    callee: Identifier
    arguments: List['Node'] = field(default_factory=list)


@dataclass
class ExpressionStatement:
    expression: CallExpression


@dataclass
class Program:
    body: List['Node'] = field(default_factory=list)


Node = Union[Program, ExpressionStatement, CallExpression, Identifier,
             NumberLiteral, StringLiteral]
