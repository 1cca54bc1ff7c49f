"""
Conversion of structured records into an expansion environment.

Supports dataclass instances and pydantic models. The resulting key for each
field is resolved as:

- dataclasses: ``metadata["uri"]`` (stripped) if set, else the field name
- pydantic: the field alias (stripped) if set, else the field name

Example:
    >>> @dataclass
    ... class Repo:
    ...     owner: str = field(metadata={"uri": "user"})
    ...     name: str = ""
    >>> structure_to_map(Repo(owner="octocat", name="hello"))
    {'user': 'octocat', 'name': 'hello'}
"""

from __future__ import annotations

import logging
from dataclasses import fields, is_dataclass
from typing import Any, Dict

from pydantic import BaseModel

from .errors import ExpandError

logger = logging.getLogger(__name__)

URI_METADATA_KEY = "uri"


def is_structure(obj: Any) -> bool:
    """True for dataclass instances and pydantic model instances."""
    if isinstance(obj, BaseModel):
        return True
    return is_dataclass(obj) and not isinstance(obj, type)


def structure_to_map(record: Any) -> Dict[str, Any]:
    """
    Builds a name → value mapping from a structured record.

    Values are taken as-is (not stringified); nested records stay records.

    Raises:
        ExpandError: If ``record`` is neither a dataclass instance nor a pydantic model
    """
    if isinstance(record, BaseModel):
        return _model_to_map(record)
    if is_dataclass(record) and not isinstance(record, type):
        return _dataclass_to_map(record)
    raise ExpandError(
        f"expected mapping, dataclass or pydantic model, got {type(record).__name__}"
    )


def _dataclass_to_map(record: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for f in fields(record):
        tag = str(f.metadata.get(URI_METADATA_KEY, "")).strip()
        key = tag or f.name
        result[key] = getattr(record, f.name)
    logger.debug("Dataclass %s → keys %s", type(record).__name__, list(result))
    return result


def _model_to_map(record: BaseModel) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for field_name, info in type(record).model_fields.items():
        alias = (info.alias or "").strip()
        key = alias or field_name
        result[key] = getattr(record, field_name)
    logger.debug("Model %s → keys %s", type(record).__name__, list(result))
    return result


__all__ = ["URI_METADATA_KEY", "is_structure", "structure_to_map"]
