"""
Percent-encoding of expanded values.

Encoding works on UTF-8 bytes: every byte outside the allowed set is
replaced by ``%XX`` with uppercase hex digits.
"""

from __future__ import annotations

import string

from .errors import ExpandError

UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")
RESERVED = frozenset(":/?#[]@!$&'()*+,;=")
RESERVED_ALLOWED = UNRESERVED | RESERVED

_UNRESERVED_BYTES = frozenset(ord(c) for c in UNRESERVED)
_RESERVED_ALLOWED_BYTES = frozenset(ord(c) for c in RESERVED_ALLOWED)


def pct_encode(value: str, allow_reserved: bool = False) -> str:
    """
    Percent-encodes ``value``.

    Args:
        value: Text to encode
        allow_reserved: Leave URI reserved characters (``+`` and ``#`` operators)
            unescaped; otherwise only unreserved characters pass through

    Raises:
        ExpandError: If ``value`` holds lone surrogates

    Examples:
        >>> pct_encode("Hello World!")
        'Hello%20World%21'
        >>> pct_encode("/foo/bar", allow_reserved=True)
        '/foo/bar'
    """
    allowed = _RESERVED_ALLOWED_BYTES if allow_reserved else _UNRESERVED_BYTES
    try:
        data = value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ExpandError(f"value is not encodable as UTF-8: {e.reason} at index {e.start}") from e
    return "".join(chr(b) if b in allowed else f"%{b:02X}" for b in data)


__all__ = ["UNRESERVED", "RESERVED", "RESERVED_ALLOWED", "pct_encode"]
