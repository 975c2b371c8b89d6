"""Query facade over a single immutable WeightedGraph.

The engine holds one store and answers the three questions the package
exists for: is a cycle reachable, what is the cheapest path, and what
spanning tree grows from a node.  Each call runs its algorithm from
scratch against the shared store; the algorithms share nothing else.

Usage:
    engine = load_engine("graphinfo.txt")   # weighted_graph.io.loader
    engine.has_cycle(1)
    engine.shortest_path(1, 0)          # PathResult(cost=4.0, path=[1, 2, 0])
    engine.minimum_spanning_tree(1)     # [(1, 2), (2, 0)]
"""
from __future__ import annotations

from weighted_graph.graph.cycle_detector import CycleResult, detect_cycle
from weighted_graph.graph.shortest_path import (
    DistanceRecord,
    PathResult,
    dijkstra,
    shortest_path,
)
from weighted_graph.graph.spanning_tree import minimum_spanning_tree
from weighted_graph.graph.store import WeightedGraph
from weighted_graph.graph.types import NodeId, TreeEdge


class GraphEngine:
    """Read-only query surface for a built graph."""

    __slots__ = ("_graph",)

    def __init__(self, graph: WeightedGraph) -> None:
        self._graph = graph

    @property
    def graph(self) -> WeightedGraph:
        return self._graph

    @property
    def node_count(self) -> int:
        return self._graph.node_count

    def neighbor_count(self, node: NodeId) -> int:
        return self._graph.neighbor_count(node)

    def has_cycle(self, source: NodeId) -> bool:
        return self.detect_cycle(source).has_cycle

    def detect_cycle(self, source: NodeId) -> CycleResult:
        return detect_cycle(self._graph, source)

    def dijkstra(self, source: NodeId) -> list[DistanceRecord]:
        return dijkstra(self._graph, source)

    def shortest_path(self, source: NodeId, target: NodeId) -> PathResult:
        return shortest_path(self._graph, source, target)

    def minimum_spanning_tree(self, source: NodeId) -> list[TreeEdge]:
        return minimum_spanning_tree(self._graph, source)

    def __repr__(self) -> str:
        return f"GraphEngine({self._graph!r})"
