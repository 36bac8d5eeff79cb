"""Pytest configuration and shared helpers.

Provides organisation factories used across the unit tests.
"""

import pytest

from src.domain.entities.organisation import Organisation


def create_organisation(
    org_unit_id: str = "OU-001",
    name: str = "Finance",
) -> Organisation:
    """Helper to create an Organisation for testing.

    Args:
        org_unit_id: Organisation identifier (default: "OU-001").
        name: Display name (default: "Finance").

    Returns:
        Organisation instance for testing.
    """
    return Organisation(org_unit_id=org_unit_id, name=name)


@pytest.fixture
def organisation() -> Organisation:
    """Single organisation with default values."""
    return create_organisation()


@pytest.fixture
def organisations() -> list[Organisation]:
    """Three distinct organisations in a fixed order."""
    return [
        create_organisation("OU-001", "Finance"),
        create_organisation("OU-002", "Human Resources"),
        create_organisation("OU-003", "Engineering"),
    ]
