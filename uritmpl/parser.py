"""
Parser of URI template strings.

Turns a raw template into an ordered tuple of parts:

template   → literal (expression literal)*
expression → "{" operator? varspec ("," varspec)* "}"
operator   → "+" | "#" | "." | "/" | ";" | "?" | "&"
varspec    → varname ("*" | ":" max-length)?

Literal text is taken as-is and is never re-escaped. Parsing is fail-fast:
the first syntax error aborts the whole template.
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from .errors import TemplateParseError
from .model import (
    VALID_NAME,
    Expression,
    Literal,
    Operator,
    Part,
    Term,
)

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"^[0-9]+$")


class TemplateParser:
    """
    Splits a template into literal and expression parts.

    The parser keeps no state between calls and may be reused.
    """

    def parse(self, raw: str) -> Tuple[Part, ...]:
        """
        Parses a template string into parts.

        Args:
            raw: Template string, e.g. ``"http://example.com/{user}{?q,lang}"``

        Returns:
            Parts in template order: Literal, Expression, Literal, ..., Literal

        Raises:
            TemplateParseError: On unbalanced braces or an invalid expression
        """
        segments = raw.split("{")
        parts: List[Part] = []

        head = segments[0]
        if "}" in head:
            raise TemplateParseError("unexpected '}'", head.index("}"), head)
        parts.append(Literal(head))

        offset = len(head) + 1
        for segment in segments[1:]:
            pieces = segment.split("}")
            if len(pieces) != 2:
                reason = "missing '}'" if len(pieces) == 1 else "unexpected '}'"
                raise TemplateParseError(f"malformed template, {reason}", offset - 1, "{" + segment)

            body, tail = pieces
            parts.append(self.parse_expression(body, offset))
            parts.append(Literal(tail))
            offset += len(segment) + 1

        logger.debug("Parsed template %r into %d parts", raw, len(parts))
        return tuple(parts)

    def parse_expression(self, body: str, position: int = 0) -> Expression:
        """
        Parses the inside of a ``{...}`` expression.

        Args:
            body: Expression text without braces, e.g. ``"?q,lang"``
            position: Offset of ``body`` in the raw template, for diagnostics
        """
        if not body:
            raise TemplateParseError("empty expression", position, "{}")

        operator = Operator.from_char(body[0])
        if operator is not Operator.SIMPLE:
            body = body[1:]
            position += 1

        terms: List[Term] = []
        for varspec in body.split(","):
            terms.append(self.parse_term(varspec, position))
            position += len(varspec) + 1

        return Expression(operator=operator, terms=tuple(terms))

    def parse_term(self, varspec: str, position: int = 0) -> Term:
        """
        Parses a single varspec: ``name``, ``name*`` or ``name:N``.

        Args:
            varspec: Raw varspec text
            position: Offset of ``varspec`` in the raw template, for diagnostics
        """
        explode = varspec.endswith("*")
        spec = varspec[:-1] if explode else varspec

        name, *modifiers = spec.split(":")
        truncate = 0
        if len(modifiers) > 1:
            raise TemplateParseError("multiple colons in same term", position, varspec)
        if modifiers:
            truncate = self._parse_prefix_length(modifiers[0], varspec, position)

        if not VALID_NAME.fullmatch(name):
            raise TemplateParseError(f"not a valid name: {name!r}", position, varspec)

        if explode and modifiers:
            raise TemplateParseError("both explode and prefix modifiers on same term", position, varspec)

        return Term(name=name, explode=explode, truncate=truncate)

    @staticmethod
    def _parse_prefix_length(text: str, varspec: str, position: int) -> int:
        if not _DIGITS.fullmatch(text):
            raise TemplateParseError(f"invalid prefix length {text!r}", position, varspec)
        try:
            return int(text)
        except ValueError as e:
            # interpreter limit on integer string conversion
            raise TemplateParseError(f"invalid prefix length: {e}", position, varspec) from e


__all__ = ["TemplateParser"]
