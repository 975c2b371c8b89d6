"""Shared fixtures for graph store and algorithm tests."""
from __future__ import annotations

import pytest

from weighted_graph.graph.store import WeightedGraph

SEED = 42


@pytest.fixture
def empty_graph() -> WeightedGraph:
    return WeightedGraph(0)


@pytest.fixture
def triangle_graph() -> WeightedGraph:
    """
    1 -> 0  (5)
    1 -> 2  (3)
    2 -> 0  (1)
    """
    return WeightedGraph(3, [(1, 0, 5.0), (1, 2, 3.0), (2, 0, 1.0)])


@pytest.fixture
def self_loop_graph() -> WeightedGraph:
    """0 -> 0 (2), nothing else."""
    return WeightedGraph(1, [(0, 0, 2.0)])


@pytest.fixture
def linear_graph() -> WeightedGraph:
    """0 -> 1 -> 2 -> 3, weights 1, 2, 3."""
    return WeightedGraph(4, [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 3.0)])


@pytest.fixture
def diamond_graph() -> WeightedGraph:
    """
    0 -> 1 -> 3   (1, 1)
    0 -> 2 -> 3   (4, 1)
    """
    return WeightedGraph(
        4, [(0, 1, 1.0), (0, 2, 4.0), (1, 3, 1.0), (2, 3, 1.0)]
    )
