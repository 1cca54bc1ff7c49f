"""
Public template API.

    >>> tpl = parse("https://api.github.com/repos{/user,repo}")
    >>> tpl.expand({"user": "jtacoma", "repo": "uritemplates"})
    'https://api.github.com/repos/jtacoma/uritemplates'

A parsed Template is immutable and may be expanded any number of times,
from any number of threads.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, Tuple

from .errors import ExpandError
from .expander import TemplateExpander
from .model import Expression, Part, Term
from .parser import TemplateParser
from .structure import is_structure, structure_to_map

_PARSER = TemplateParser()


class Template:
    """A parsed URI template."""

    __slots__ = ("_raw", "_parts")

    def __init__(self, raw: str, parts: Tuple[Part, ...]):
        self._raw = raw
        self._parts = parts

    @property
    def raw(self) -> str:
        """Source string the template was parsed from."""
        return self._raw

    @property
    def parts(self) -> Tuple[Part, ...]:
        return self._parts

    @property
    def expressions(self) -> Tuple[Expression, ...]:
        return tuple(p for p in self._parts if isinstance(p, Expression))

    def variables(self) -> Iterator[Term]:
        """Terms of all expressions in template order."""
        for expr in self.expressions:
            yield from expr.terms

    def variable_names(self) -> Tuple[str, ...]:
        """Distinct term names in order of first appearance."""
        return tuple(dict.fromkeys(term.name for term in self.variables()))

    def expand(self, env: Any = None) -> str:
        """
        Expands the template.

        Args:
            env: Mapping of term name to value; a dataclass instance or
                pydantic model is converted with ``structure_to_map``

        Returns:
            Expanded, percent-encoded URI string

        Raises:
            ExpandError: If ``env`` or one of its values cannot be expanded
        """
        return TemplateExpander(_as_environment(env)).expand(self._parts)

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Template({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self) -> int:
        return hash(self._parts)


def parse(raw: str) -> Template:
    """
    Parses a URI template string.

    Raises:
        TemplateParseError: If the template is malformed
    """
    return Template(raw, _PARSER.parse(raw))


def expand(template: str, env: Any = None) -> str:
    """
    Parses and expands a template in one step.

    Raises:
        UriTemplateError: TemplateParseError or ExpandError
    """
    return parse(template).expand(env)


def _as_environment(env: Any) -> Mapping[str, Any]:
    if env is None:
        return {}
    if isinstance(env, Mapping):
        return env
    if is_structure(env):
        return structure_to_map(env)
    raise ExpandError(
        f"expected mapping, dataclass or pydantic model, got {type(env).__name__}"
    )


__all__ = ["Template", "parse", "expand"]
