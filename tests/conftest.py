"""Shared graph fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def grid3x3():
    # A B C
    # D E F
    # G H I
    return {
        "a": {"b": 10, "d": 1},
        "b": {"a": 1, "c": 1, "e": 1},
        "c": {"b": 1, "f": 1},
        "d": {"a": 1, "e": 1, "g": 1},
        "e": {"b": 1, "d": 1, "f": 1, "h": 1},
        "f": {"c": 1, "e": 1, "i": 1},
        "g": {"d": 1, "h": 1},
        "h": {"e": 1, "g": 1, "i": 1},
        "i": {"f": 1, "h": 1},
    }


@pytest.fixture
def weighted():
    return {
        "a": {"b": 10, "c": 100, "d": 1},
        "b": {"c": 10},
        "d": {"b": 1, "e": 1},
        "e": {"f": 1},
        "f": {"c": 1},
        "g": {"b": 1},
    }


@pytest.fixture
def two_nodes():
    return {"a": {"b": 1}, "b": {}}
