"""Pytest configuration and shared fixtures for lumberyard tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from lumberyard.domain import (
    ConditionalAction,
    DryAction,
    Inventory,
    PredicateKind,
    TreatAction,
    WoodRecord,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI end to end"
    )


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def mixed_inventory() -> Inventory:
    """Inventory with one dried, one conditionally treated and one idle record."""
    inventory = Inventory()
    inventory.add_item(WoodRecord("Teak", 15.0, 15.0, False, [DryAction()]))
    inventory.add_item(
        WoodRecord(
            "Walnut",
            18.0,
            12.0,
            False,
            [ConditionalAction(TreatAction(), PredicateKind.MOISTURE_ABOVE, 10.0)],
        )
    )
    inventory.add_item(WoodRecord("Pine", 20.0, 10.0, False, []))
    return inventory
