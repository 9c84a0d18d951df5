"""Fixtures for blending tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from blendr.core.blending import unregister_value_category


@pytest.fixture
def registered_types() -> Iterator[list[type]]:
    """Collect types registered by a test and unregister them afterwards."""
    types: list[type] = []
    yield types
    for value_type in types:
        unregister_value_category(value_type)
