"""
Shared test infrastructure.

Modules:
- yaml_cases: Loading of data-driven expansion cases from YAML fixtures
"""

from .yaml_cases import ExpansionCase, ExpansionSuite, load_suite, FIXTURES_DIR

__all__ = [
    "ExpansionCase", "ExpansionSuite", "load_suite", "FIXTURES_DIR",
]
