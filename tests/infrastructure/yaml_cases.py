"""
Loading of data-driven expansion cases from YAML fixtures.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from ruamel.yaml import YAML

_yaml = YAML(typ="safe")

FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"


@dataclass(frozen=True)
class ExpansionCase:
    """One ``template → expected`` pair from a fixture section."""
    section: str
    template: str
    expected: str

    @property
    def id(self) -> str:
        return f"{self.section}:{self.template}"


@dataclass
class ExpansionSuite:
    variables: Dict[str, Any]
    cases: List[ExpansionCase]


def load_suite(name: str) -> ExpansionSuite:
    """
    Loads ``tests/fixtures/<name>.yaml``.

    The file holds a ``variables`` mapping and ``sections`` of
    ``[template, expected]`` pairs.
    """
    path = FIXTURES_DIR / f"{name}.yaml"
    data = _yaml.load(path.read_text(encoding="utf-8")) or {}

    cases: List[ExpansionCase] = []
    for section, pairs in (data.get("sections") or {}).items():
        for template, expected in pairs:
            cases.append(ExpansionCase(section=section, template=template, expected=expected))

    return ExpansionSuite(variables=dict(data.get("variables") or {}), cases=cases)


__all__ = ["ExpansionCase", "ExpansionSuite", "load_suite", "FIXTURES_DIR"]
