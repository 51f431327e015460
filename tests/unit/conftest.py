"""Mark everything collected under `tests/unit/` as a unit test."""

from pathlib import Path

import pytest

UNIT_DIR = Path(__file__).parent.resolve()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Add the `unit` marker to unit tests that do not already carry it."""
    for item in items:
        in_unit_dir = item.path.resolve().is_relative_to(UNIT_DIR)
        if in_unit_dir and item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
