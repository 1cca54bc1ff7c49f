"""
Expansion of parsed templates against an environment.

Walks the template parts in order: literals are copied verbatim,
expressions are rendered according to their operator rules.

Each expression is rendered into its own buffer first. The operator prefix
is written only when at least one term produced text, so an expression whose
terms are all undefined contributes nothing to the result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from .encoding import pct_encode
from .errors import ExpandError
from .model import Expression, Literal, OperatorSpec, Part, Term
from .values import ListValue, MapValue, Scalar, Value, to_value

logger = logging.getLogger(__name__)


class TemplateExpander:
    """
    Renders template parts with values from an environment.

    The environment is only read, never stored beyond the expander's lifetime
    or modified.
    """

    def __init__(self, env: Mapping[str, Any]):
        """
        Args:
            env: Mapping of term name to value (scalar, list or mapping)
        """
        self.env = env

    def expand(self, parts: Iterable[Part]) -> str:
        """
        Renders all parts into a single string.

        Raises:
            ExpandError: If a value does not fit its term
        """
        out: List[str] = []
        for part in parts:
            if isinstance(part, Literal):
                out.append(part.text)
            elif isinstance(part, Expression):
                out.append(self.expand_expression(part))
            else:
                raise ExpandError(f"Unknown template part: {type(part).__name__}")
        return "".join(out)

    def expand_expression(self, expr: Expression) -> str:
        """Renders one expression, including its operator prefix when non-empty."""
        spec = expr.spec
        text = ""

        for term in expr.terms:
            value = self._lookup(term)
            if value is None:
                continue

            try:
                rendered = self._expand_term(spec, term, value)
            except ExpandError as e:
                if e.term is not None:
                    raise
                raise ExpandError(e.message, term.name) from e

            if text:
                text += spec.separator
            text += rendered

        if not text:
            logger.debug("Expression %s rendered nothing, prefix suppressed", expr)
            return ""
        return spec.prefix + text

    def _lookup(self, term: Term) -> Optional[Value]:
        raw = self.env.get(term.name)
        if raw is None:
            logger.debug("Term '%s' is undefined, skipped", term.name)
            return None

        value = to_value(raw, term.name)
        if isinstance(value, MapValue) and term.truncate > 0:
            raise ExpandError("cannot truncate a map expansion", term.name)
        if isinstance(value, (ListValue, MapValue)) and value.is_empty():
            logger.debug("Term '%s' is an empty collection, skipped", term.name)
            return None
        return value

    def _expand_term(self, spec: OperatorSpec, term: Term, value: Value) -> str:
        if isinstance(value, Scalar):
            return self._expand_scalar(spec, term, value.text)
        if isinstance(value, ListValue):
            return self._expand_list(spec, term, value.items)
        if isinstance(value, MapValue):
            return self._expand_map(spec, term, value.pairs)
        raise ExpandError(f"unsupported value kind {type(value).__name__}", term.name)

    def _expand_scalar(self, spec: OperatorSpec, term: Term, text: str) -> str:
        text = _truncate(text, term.truncate)
        return _name_prefix(spec, term.name, empty=not text) + pct_encode(text, spec.allow_reserved)

    def _expand_list(self, spec: OperatorSpec, term: Term, items) -> str:
        items = [_truncate(item, term.truncate) for item in items]

        if not term.explode:
            joined = ",".join(pct_encode(item, spec.allow_reserved) for item in items)
            return _name_prefix(spec, term.name, empty=False) + joined

        return spec.separator.join(
            _name_prefix(spec, term.name, empty=not item) + pct_encode(item, spec.allow_reserved)
            for item in items
        )

    def _expand_map(self, spec: OperatorSpec, term: Term, pairs) -> str:
        if not term.explode:
            joined = ",".join(
                f"{pct_encode(key, spec.allow_reserved)},{pct_encode(val, spec.allow_reserved)}"
                for key, val in pairs
            )
            return _name_prefix(spec, term.name, empty=False) + joined

        return spec.separator.join(
            f"{pct_encode(key, spec.allow_reserved)}={pct_encode(val, spec.allow_reserved)}"
            for key, val in pairs
        )


def _truncate(text: str, length: int) -> str:
    if length > 0:
        return text[:length]
    return text


def _name_prefix(spec: OperatorSpec, name: str, empty: bool) -> str:
    """``name=`` for named operators (``name`` + if_empty for empty text), else nothing."""
    if not spec.named:
        return ""
    if not empty:
        return f"{name}="
    return f"{name}{spec.if_empty}"


__all__ = ["TemplateExpander"]
