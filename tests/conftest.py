"""Pytest configuration and shared fixtures for simready tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from simready.application.config.validator import ValidatorRegistry

FIXTURES_PATH = Path(__file__).parent / "fixtures"
DOCUMENTS_PATH = FIXTURES_PATH / "documents"
SCHEDULES_PATH = FIXTURES_PATH / "schedules"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests exercising the CLI or HTTP surfaces end to end"
    )


# =============================================================================
# Registry isolation
# =============================================================================


@pytest.fixture(autouse=True)
def empty_registry():
    """Start every test with no additional validators registered."""
    ValidatorRegistry.clear()
    yield
    ValidatorRegistry.clear()


# =============================================================================
# Document fixtures
# =============================================================================


def load_fixture(name: str) -> Any:
    """Load a JSON document fixture by file name."""
    return json.loads((DOCUMENTS_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def office_data() -> dict[str, Any]:
    """A complete, consistent two-zone office document as raw JSON."""
    return load_fixture("office.json")


@pytest.fixture
def office_zones() -> list[dict[str, Any]]:
    """The two zones the office document is written against."""
    return load_fixture("zones.json")["zones"]

