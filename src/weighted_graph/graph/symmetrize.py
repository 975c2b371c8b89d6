"""Turn a directed weighted graph into an undirected one.

For every edge u -> v that has no matching v -> u, the reverse edge is
added with the same weight.  When the reverse edge exists but carries a
different weight, nothing is added; the first weight seen wins and a
warning is logged so the asymmetry doesn't go unnoticed.

This is an explicit preprocessing step.  The store itself stays
directed, and the input graph is never modified.
"""
from __future__ import annotations

import logging

from weighted_graph.graph.store import WeightedGraph
from weighted_graph.graph.types import NodeId, Weight

log = logging.getLogger(__name__)


def make_undirected(graph: WeightedGraph) -> WeightedGraph:
    """Return a new graph with every edge mirrored.

    Nodes are walked in ascending order and each node's edges in stored
    order, including reverse edges appended earlier in the walk.
    """
    adj: list[list[tuple[NodeId, Weight]]] = [
        list(graph.neighbors(n)) for n in graph.nodes()
    ]
    inconsistent = 0

    for u in graph.nodes():
        # a self-loop always finds itself, so adj[u] can't grow mid-walk
        for v, w in adj[u]:
            found = False
            for back, back_w in adj[v]:
                if back == u:
                    found = True
                    if back_w != w:
                        inconsistent += 1
                        log.warning(
                            "Inconsistent weights between %d and %d "
                            "(%g vs %g), keeping first one found",
                            u, v, w, back_w,
                        )
            if not found:
                adj[v].append((u, w))

    if inconsistent:
        log.debug("make_undirected: %d asymmetric weight(s)", inconsistent)
    return WeightedGraph.from_adjacency(adj, capacity=graph.capacity)
