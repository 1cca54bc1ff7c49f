"""
Version of the installed distribution.

Kept free of imports from the rest of the package so that ``__init__``
can read it without cycles.
"""

from __future__ import annotations

from importlib import metadata

_DIST_NAMES = ("uri-tmpl", "uritmpl")


def tool_version() -> str:
    """Installed version of uri-tmpl, ``"0.0.0"`` for a source checkout."""
    for dist in _DIST_NAMES:
        try:
            return metadata.version(dist)
        except metadata.PackageNotFoundError:
            continue
    return "0.0.0"


__all__ = ["tool_version"]
