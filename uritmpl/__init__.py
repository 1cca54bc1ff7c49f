"""
RFC 6570 (level 4) URI templates.

Parse a template once, expand it many times:

    >>> from uritmpl import parse
    >>> parse("http://localhost:8080/{?date,name}").expand({"date": "2017-07-13"})
    'http://localhost:8080/?date=2017-07-13'

Set URITMPL_DEBUG=1 to get parse/expand debug logging on stderr.
"""

from __future__ import annotations

import logging
import os

from .errors import ExpandError, TemplateParseError, UriTemplateError
from .model import Expression, Literal, Operator, OperatorSpec, Part, Term
from .structure import structure_to_map
from .template import Template, expand, parse
from .values import ListValue, MapValue, Scalar, Value, to_value
from .version import tool_version

_LOG = logging.getLogger("uritmpl")


def _setup_logging_once() -> None:
    if getattr(_setup_logging_once, "_inited", False):
        return
    _setup_logging_once._inited = True  # type: ignore[attr-defined]
    if not os.environ.get("URITMPL_DEBUG"):
        return
    _LOG.setLevel(logging.DEBUG)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)

_setup_logging_once()

__version__ = tool_version()

__all__ = [
    # API
    "parse",
    "expand",
    "Template",
    "structure_to_map",

    # Grammar
    "Operator",
    "OperatorSpec",
    "Term",
    "Literal",
    "Expression",
    "Part",

    # Values
    "Scalar",
    "ListValue",
    "MapValue",
    "Value",
    "to_value",

    # Exceptions
    "UriTemplateError",
    "TemplateParseError",
    "ExpandError",
]
