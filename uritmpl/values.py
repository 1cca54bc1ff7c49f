"""
Value kinds understood by the expander.

An environment maps names to arbitrary Python objects. Before expansion each
object is lifted into exactly one of three kinds:

- Scalar: a single string (any non-collection object via ``str()``)
- ListValue: an ordered sequence of scalar strings
- MapValue: ordered ``(key, value)`` pairs of scalar strings

Dataclass instances and pydantic models are converted to MapValue through
``structure_to_map``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from .errors import ExpandError
from .structure import is_structure, structure_to_map


@dataclass(frozen=True)
class Scalar:
    text: str


@dataclass(frozen=True)
class ListValue:
    items: Tuple[str, ...]

    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class MapValue:
    pairs: Tuple[Tuple[str, str], ...]

    def is_empty(self) -> bool:
        return not self.pairs


Value = Union[Scalar, ListValue, MapValue]


def to_value(obj: Any, name: Optional[str] = None) -> Value:
    """
    Lifts an environment object into a Value.

    Args:
        obj: Raw environment value (must not be None)
        name: Term name, used in error messages

    Raises:
        ExpandError: If a list or map member is itself a collection
            or a bytes value is not valid UTF-8
    """
    if isinstance(obj, (Scalar, ListValue, MapValue)):
        return obj
    if isinstance(obj, str):
        return Scalar(obj)
    if isinstance(obj, (bytes, bytearray)):
        return Scalar(_decode(obj, name))
    if isinstance(obj, Mapping):
        return _map_value(obj, name)
    if isinstance(obj, (list, tuple)):
        return ListValue(tuple(
            _scalar_text(item, name) for item in obj if item is not None
        ))
    if is_structure(obj):
        return _map_value(structure_to_map(obj), name)
    return Scalar(str(obj))


def _map_value(mapping: Mapping, name: Optional[str]) -> MapValue:
    # Members with a None value are undefined and dropped
    return MapValue(tuple(
        (_scalar_text(key, name), _scalar_text(value, name))
        for key, value in mapping.items()
        if value is not None
    ))


def _scalar_text(obj: Any, name: Optional[str]) -> str:
    if isinstance(obj, str):
        return obj
    if isinstance(obj, (bytes, bytearray)):
        return _decode(obj, name)
    if isinstance(obj, (Mapping, list, tuple)) or is_structure(obj):
        raise ExpandError(
            f"nested {type(obj).__name__} cannot be rendered as a scalar", name
        )
    return str(obj)


def _decode(data, name: Optional[str]) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExpandError(f"bytes value is not valid UTF-8: {e.reason}", name) from e


__all__ = ["Scalar", "ListValue", "MapValue", "Value", "to_value"]
