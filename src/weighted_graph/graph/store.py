"""Bounded-capacity weighted directed graph.

Nodes are the dense integers 0..node_count-1; there is no node object.
Each node owns an ordered tuple of (destination, weight) pairs for its
outgoing edges.  The store is built once and never mutated afterwards,
so every algorithm in this package can share one instance freely.

Two construction policies worth knowing about:

  - an edge whose *source* is out of range is a construction error;
  - an edge whose *destination* is out of range is dropped, counted in
    ``dropped_edges`` and logged, and the rest of the graph still loads.

Self-loops and parallel edges are kept as given.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator, Sequence

from weighted_graph.graph.types import EdgeTuple, NodeId, Weight

log = logging.getLogger(__name__)

MAX_NODES = 100


class GraphConstructionError(ValueError):
    """Raised when a graph cannot be built from the given input."""


class CapacityExceededError(GraphConstructionError):
    """Raised when the node count is larger than the store's capacity."""

    def __init__(self, node_count: int, capacity: int) -> None:
        self.node_count = node_count
        self.capacity = capacity
        super().__init__(
            f"Too many nodes: {node_count} exceeds capacity {capacity}"
        )


class NodeOutOfRangeError(IndexError):
    """Raised when a query names a node outside [0, node_count)."""

    def __init__(self, node: int, node_count: int) -> None:
        self.node = node
        self.node_count = node_count
        super().__init__(
            f"Node {node!r} out of range: graph has nodes 0..{node_count - 1}"
            if node_count
            else f"Node {node!r} out of range: graph has no nodes"
        )


class WeightedGraph:
    """Immutable weighted digraph over nodes 0..node_count-1.

    Args:
        node_count: number of nodes; must not exceed *capacity*.
        edges: iterable of (src, dst, weight) triples.
        capacity: hard upper bound on node_count (default MAX_NODES).
    """

    __slots__ = ("_adj", "_capacity", "_dropped")

    def __init__(
        self,
        node_count: int,
        edges: Iterable[EdgeTuple] = (),
        capacity: int = MAX_NODES,
    ) -> None:
        if node_count < 0:
            raise GraphConstructionError(
                f"Node count must be non-negative, got {node_count}"
            )
        if node_count > capacity:
            raise CapacityExceededError(node_count, capacity)

        adj: list[list[tuple[NodeId, Weight]]] = [[] for _ in range(node_count)]
        dropped = 0
        for src, dst, weight in edges:
            if not 0 <= src < node_count:
                raise GraphConstructionError(
                    f"Edge source {src} out of range for {node_count} node(s)"
                )
            if not 0 <= dst < node_count:
                log.warning(
                    "Dropping edge %d -> %d: destination out of range", src, dst
                )
                dropped += 1
                continue
            weight = float(weight)
            if not math.isfinite(weight) or weight < 0:
                raise GraphConstructionError(
                    f"Edge {src} -> {dst} has invalid weight {weight!r}; "
                    f"weights must be finite and non-negative"
                )
            adj[src].append((dst, weight))

        self._adj: tuple[tuple[tuple[NodeId, Weight], ...], ...] = tuple(
            tuple(nbrs) for nbrs in adj
        )
        self._capacity = capacity
        self._dropped = dropped

    @classmethod
    def from_adjacency(
        cls,
        records: Sequence[Iterable[tuple[NodeId, Weight]]],
        capacity: int = MAX_NODES,
    ) -> WeightedGraph:
        """Build from one (dst, weight) sequence per node, in node order.

        ``records[i]`` lists the outgoing edges of node i, so the node
        count is ``len(records)``.
        """
        return cls(
            len(records),
            (
                (src, dst, weight)
                for src, nbrs in enumerate(records)
                for dst, weight in nbrs
            ),
            capacity=capacity,
        )

    # ---- queries ---------------------------------------------------------

    def check_node(self, node: NodeId) -> NodeId:
        """Return *node* unchanged, or raise NodeOutOfRangeError."""
        if not 0 <= node < len(self._adj):
            raise NodeOutOfRangeError(node, len(self._adj))
        return node

    def neighbors(self, node: NodeId) -> tuple[tuple[NodeId, Weight], ...]:
        """Outgoing (destination, weight) pairs of *node* in insertion order."""
        return self._adj[self.check_node(node)]

    def neighbor_count(self, node: NodeId) -> int:
        return len(self._adj[self.check_node(node)])

    def has_edge(self, src: NodeId, dst: NodeId) -> bool:
        self.check_node(dst)
        return any(d == dst for d, _ in self._adj[self.check_node(src)])

    def nodes(self) -> range:
        return range(len(self._adj))

    def edges(self) -> Iterator[EdgeTuple]:
        for src, nbrs in enumerate(self._adj):
            for dst, weight in nbrs:
                yield src, dst, weight

    @property
    def node_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def dropped_edges(self) -> int:
        """Edges discarded at construction because dst was out of range."""
        return self._dropped

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._adj)

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(nodes={self.node_count}, edges={self.edge_count}, "
            f"capacity={self._capacity})"
        )
