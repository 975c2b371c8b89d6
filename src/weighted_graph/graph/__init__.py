"""Weighted directed graph store and the algorithms that query it."""

from weighted_graph.graph.cycle_detector import CycleResult, detect_cycle, has_cycle
from weighted_graph.graph.engine import GraphEngine
from weighted_graph.graph.shortest_path import (
    DistanceRecord,
    PathResult,
    dijkstra,
    shortest_path,
)
from weighted_graph.graph.spanning_tree import minimum_spanning_tree, tree_weight
from weighted_graph.graph.store import (
    MAX_NODES,
    CapacityExceededError,
    GraphConstructionError,
    NodeOutOfRangeError,
    WeightedGraph,
)
from weighted_graph.graph.symmetrize import make_undirected

__all__ = [
    "MAX_NODES",
    "CapacityExceededError",
    "CycleResult",
    "DistanceRecord",
    "GraphConstructionError",
    "GraphEngine",
    "NodeOutOfRangeError",
    "PathResult",
    "WeightedGraph",
    "detect_cycle",
    "dijkstra",
    "has_cycle",
    "make_undirected",
    "minimum_spanning_tree",
    "shortest_path",
    "tree_weight",
]
