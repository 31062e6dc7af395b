"""Syntax tree for the Lumia language. The parser only ever places leaves (StringLiteral, Number, Identifier) inside a
Show, so Show nodes are never nested.
"""

from dataclasses import dataclass, field
from typing import List


class Node:
    """Superclass for every syntax tree node."""


@dataclass
class Show(Node):
    """show(arg, ...) statement: prints its arguments on one line."""
    arguments: List[Node] = field(default_factory=list)


@dataclass
class StringLiteral(Node):
    text: str


@dataclass
class Number(Node):
    value: float


@dataclass
class Identifier(Node):
    name: str

