"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def progress_samples() -> list[float]:
    """Progress values spread over [0, 1]."""
    return [0.0, 0.25, 0.5, 0.75, 1.0]


@pytest.fixture
def dense_progress() -> list[float]:
    """Dense grid over [0, 1] for shape checks."""
    n = 101
    return [i / (n - 1) for i in range(n)]
