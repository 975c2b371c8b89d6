"""Single-source shortest paths (Dijkstra) with path reconstruction.

The frontier is a binary heap of (cost, seq, node, parent) entries.
Instead of a decrease-key operation, a node is simply pushed again
whenever a new tentative cost is found, and stale entries are skipped
on pop once the node has been finalized.  The first pop of a node is
necessarily its cheapest, so that pop is the one recorded.  The seq
counter breaks cost ties in push order, which keeps results
deterministic when several paths cost the same.

Edge weights are non-negative (the store rejects anything else), which
is the precondition Dijkstra needs.

Path reconstruction walks parent links backward from the target and
reverses the result.
"""
from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass, field

from weighted_graph.graph.store import WeightedGraph
from weighted_graph.graph.types import NodeId, Weight


@dataclass(slots=True)
class DistanceRecord:
    """Best-known cost of reaching a node, and its predecessor on that path."""
    parent: NodeId | None = None
    cost: Weight = math.inf

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.cost)


@dataclass(slots=True)
class PathResult:
    """Result of a source-to-target shortest path query."""
    cost: Weight
    path: list[NodeId] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.cost)


def dijkstra(graph: WeightedGraph, source: NodeId) -> list[DistanceRecord]:
    """Return a DistanceRecord for every node, indexed by node id.

    Unreachable nodes keep cost=inf and parent=None.  The source has
    cost 0 and parent None.

    Raises NodeOutOfRangeError if *source* is not a node of *graph*.
    """
    graph.check_node(source)
    dist = [DistanceRecord() for _ in graph.nodes()]
    visited = [False] * graph.node_count
    seq = itertools.count()

    pq: list[tuple[Weight, int, NodeId, NodeId | None]] = [
        (0.0, next(seq), source, None)
    ]
    while pq:
        cost, _, node, parent = heapq.heappop(pq)
        if visited[node]:
            continue
        visited[node] = True
        dist[node] = DistanceRecord(parent=parent, cost=cost)

        for succ, weight in graph.neighbors(node):
            if not visited[succ]:
                heapq.heappush(pq, (cost + weight, next(seq), succ, node))

    return dist


def shortest_path(
    graph: WeightedGraph, source: NodeId, target: NodeId
) -> PathResult:
    """Find the minimum-cost path from *source* to *target*.

    Returns PathResult(inf, []) if *target* is unreachable, and
    PathResult(0.0, [source]) when source == target (self-loops are
    never part of a shortest path).

    Raises NodeOutOfRangeError if either node is not in *graph*.
    """
    graph.check_node(target)
    dist = dijkstra(graph, source)

    cost = dist[target].cost
    if math.isinf(cost):
        return PathResult(cost=cost, path=[])

    path: list[NodeId] = [target]
    cur = target
    while cur != source:
        cur = dist[cur].parent  # type: ignore[assignment]
        path.append(cur)
    path.reverse()

    return PathResult(cost=cost, path=path)
