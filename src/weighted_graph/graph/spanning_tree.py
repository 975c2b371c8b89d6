"""Minimum spanning tree from a source node (Prim's algorithm).

Same lazy frontier as the Dijkstra module, but entries are keyed by the
raw weight of the connecting edge rather than the accumulated path
cost.  Each time an unfinalized node is popped, the edge that reached
it joins the tree.

Edges are followed in their stored direction only, so the tree spans
the subgraph reachable from the source along outgoing edges.  Run the
graph through ``make_undirected`` first to get the classic undirected
behaviour.
"""
from __future__ import annotations

import heapq
import itertools

from weighted_graph.graph.store import WeightedGraph
from weighted_graph.graph.types import NodeId, TreeEdge, Weight


def minimum_spanning_tree(
    graph: WeightedGraph, source: NodeId
) -> list[TreeEdge]:
    """Return the tree edges as (parent, child) pairs in finalization order.

    Nodes unreachable from *source* are simply absent.  A source with no
    outgoing edges yields an empty list.

    Raises NodeOutOfRangeError if *source* is not a node of *graph*.
    """
    graph.check_node(source)
    visited = [False] * graph.node_count
    seq = itertools.count()
    mst: list[TreeEdge] = []

    pq: list[tuple[Weight, int, NodeId, NodeId | None]] = [
        (0.0, next(seq), source, None)
    ]
    while pq:
        _, _, node, parent = heapq.heappop(pq)
        if visited[node]:
            continue
        visited[node] = True
        if parent is not None:
            mst.append((parent, node))

        for succ, weight in graph.neighbors(node):
            if not visited[succ]:
                heapq.heappush(pq, (weight, next(seq), succ, node))

    return mst


def tree_weight(graph: WeightedGraph, tree: list[TreeEdge]) -> Weight:
    """Total weight of *tree*, using the cheapest parallel edge for each pair."""
    total = 0.0
    for parent, child in tree:
        total += min(w for dst, w in graph.neighbors(parent) if dst == child)
    return total
