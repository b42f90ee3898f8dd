"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from aegis.config import reset_config

from tests.factories import build_graph


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def city_graph():
    """Two ways from A to D: A-B-D (cost 7) and the direct A-D (cost 10)."""
    return build_graph(
        "ABCDE",
        undirected=[
            ("A", "B", 3),
            ("B", "D", 4),
            ("A", "D", 10),
            ("A", "C", 1),
            ("C", "B", 5),
        ],
    )
