import pytest

from tests.infrastructure import ExpansionSuite, load_suite


@pytest.fixture(scope="session")
def rfc_suite() -> ExpansionSuite:
    """RFC 6570 section 3.2 variables and expected expansions."""
    return load_suite("rfc6570_examples")
