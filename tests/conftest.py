"""Shared test fixtures for fieldrules.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from fieldrules.validator import Validator


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "fieldrules"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def age_validator() -> Validator:
    """A validator with one ``age`` field that must be at least 18."""
    return (
        Validator()
        .add_constraint("min", lambda value, limit: value >= int(limit))
        .add_messages({"min": "{title} must be at least {0}"})
        .add_field("age", "Age")
        .add_rule("age", "min", "", ["18"])
    )
