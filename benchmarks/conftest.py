"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def vertex_names() -> list[str]:
    """Vertex labels for a mid-sized graph (~10k vertices)."""
    return [f"v{i}" for i in range(10_000)]


@pytest.fixture
def edge_pairs(vertex_names: list[str]) -> list[tuple[str, str]]:
    """A ring of edges over vertex_names."""
    n = len(vertex_names)
    return [(vertex_names[i], vertex_names[(i + 1) % n]) for i in range(n)]
