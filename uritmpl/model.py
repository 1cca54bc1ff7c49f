"""
Grammar and data types of a parsed URI template.

A template compiles into an ordered tuple of parts: literal text runs and
``{...}`` expressions. Every node is an immutable dataclass, so a parsed
template can be shared freely between expansions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


# Variable names: ALPHA / DIGIT / "_" / "." / pct-encoded
VALID_NAME = re.compile(r"^([A-Za-z0-9_.]|%[0-9A-Fa-f][0-9A-Fa-f])+$")


@dataclass(frozen=True)
class OperatorSpec:
    """
    Rendering rules fixed by an expression operator.

    Attributes:
        prefix: Emitted once before the first rendered term
        separator: Emitted between rendered terms (and exploded items)
        named: Terms render as ``name=value`` pairs
        if_empty: Emitted after the name when the value is empty
        allow_reserved: Reserved characters are left unescaped
    """
    prefix: str
    separator: str
    named: bool = False
    if_empty: str = ""
    allow_reserved: bool = False


class Operator(Enum):
    """Expression operators of RFC 6570 level 4."""
    SIMPLE = ""
    RESERVED = "+"
    FRAGMENT = "#"
    LABEL = "."
    PATH = "/"
    PARAMETER = ";"
    QUERY = "?"
    CONTINUATION = "&"

    @property
    def spec(self) -> OperatorSpec:
        return _OPERATOR_SPECS[self]

    @classmethod
    def from_char(cls, char: str) -> Operator:
        """Returns the operator for a leading character, SIMPLE if it is not one."""
        if char and char in _OPERATOR_CHARS:
            return cls(char)
        return cls.SIMPLE


_OPERATOR_SPECS = {
    Operator.SIMPLE: OperatorSpec(prefix="", separator=","),
    Operator.RESERVED: OperatorSpec(prefix="", separator=",", allow_reserved=True),
    Operator.FRAGMENT: OperatorSpec(prefix="#", separator=",", allow_reserved=True),
    Operator.LABEL: OperatorSpec(prefix=".", separator="."),
    Operator.PATH: OperatorSpec(prefix="/", separator="/"),
    Operator.PARAMETER: OperatorSpec(prefix=";", separator=";", named=True),
    Operator.QUERY: OperatorSpec(prefix="?", separator="&", named=True, if_empty="="),
    Operator.CONTINUATION: OperatorSpec(prefix="&", separator="&", named=True, if_empty="="),
}

_OPERATOR_CHARS = frozenset(op.value for op in Operator if op.value)


@dataclass(frozen=True)
class Term:
    """
    A single varspec inside an expression: ``name``, ``name*`` or ``name:N``.

    ``truncate`` of 0 means no prefix modifier.
    """
    name: str
    explode: bool = False
    truncate: int = 0

    def __str__(self) -> str:
        if self.explode:
            return f"{self.name}*"
        if self.truncate:
            return f"{self.name}:{self.truncate}"
        return self.name


@dataclass(frozen=True)
class Literal:
    """Raw template text, emitted unchanged."""
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Expression:
    """A compiled ``{...}`` expression."""
    operator: Operator
    terms: Tuple[Term, ...]

    @property
    def spec(self) -> OperatorSpec:
        return self.operator.spec

    def __str__(self) -> str:
        return "{" + self.operator.value + ",".join(str(t) for t in self.terms) + "}"


Part = Union[Literal, Expression]


__all__ = [
    "VALID_NAME",
    "OperatorSpec",
    "Operator",
    "Term",
    "Literal",
    "Expression",
    "Part",
]
