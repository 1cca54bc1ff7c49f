"""
Exceptions raised for malformed templates and unusable values.

Everything the package raises on bad input inherits from UriTemplateError,
so callers of the one-shot ``expand()`` can catch both failure kinds at once.
Programming errors are NOT wrapped and propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Optional


class UriTemplateError(Exception):
    """
    Base class for all input errors of the URI template engine.

    These errors indicate problems the caller can fix:
    a malformed template string or an environment value that
    does not fit the term it is bound to.
    """
    pass


class TemplateParseError(UriTemplateError, ValueError):
    """Malformed template syntax."""

    def __init__(self, message: str, position: int = 0, fragment: str = ""):
        self.message = message
        self.position = position
        self.fragment = fragment
        details = f" in {fragment!r}" if fragment else ""
        super().__init__(f"Parse error at position {position}: {message}{details}")


class ExpandError(UriTemplateError, ValueError):
    """Environment value cannot be expanded for the given term."""

    def __init__(self, message: str, term: Optional[str] = None):
        self.message = message
        self.term = term
        if term:
            super().__init__(f"Cannot expand '{term}': {message}")
        else:
            super().__init__(message)


__all__ = ["UriTemplateError", "TemplateParseError", "ExpandError"]
