"""Cycle detection from a start node using DFS three-color marking.

The three colors:
  WHITE  -- node not yet visited
  GRAY   -- node is on the current DFS path (ancestors of current node)
  BLACK  -- node fully explored (all descendants visited)

An edge to a GRAY node is a back edge, so the graph has a cycle that is
reachable from the start node.  Every neighbor of a node is examined
before the node turns BLACK; stopping after the first neighbor would
miss cycles that only hang off a later sibling edge.

The walk keeps its own stack of (node, neighbor iterator) frames rather
than recursing, so path depth is limited only by the store's capacity,
not by the interpreter's recursion limit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from weighted_graph.graph.store import WeightedGraph
from weighted_graph.graph.types import NodeId, Weight

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(slots=True)
class CycleResult:
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[NodeId] | None = None


def _cycle_from_back_edge(
    parent: list[NodeId | None], node: NodeId, succ: NodeId
) -> list[NodeId]:
    """Closed walk succ -> ... -> node -> succ along tree edges.

    *succ* is GRAY, so it is an ancestor of *node* and the parent chain
    from *node* reaches it.
    """
    path = [node]
    while path[-1] != succ:
        path.append(parent[path[-1]])  # type: ignore[arg-type]
    path.reverse()
    path.append(succ)
    return path


def detect_cycle(graph: WeightedGraph, source: NodeId) -> CycleResult:
    """Detect whether a directed cycle is reachable from *source*.

    Returns a CycleResult with has_cycle=True and the cycle path if one
    exists.  The cycle path is a list [v0, v1, ..., vk, v0] where each
    consecutive pair is a directed edge.

    Raises NodeOutOfRangeError if *source* is not a node of *graph*.
    """
    graph.check_node(source)
    color = [WHITE] * graph.node_count
    parent: list[NodeId | None] = [None] * graph.node_count

    color[source] = GRAY
    stack: list[tuple[NodeId, Iterator[tuple[NodeId, Weight]]]] = [
        (source, iter(graph.neighbors(source)))
    ]
    while stack:
        node, nbrs = stack[-1]
        for succ, _ in nbrs:
            if color[succ] == GRAY:
                return CycleResult(
                    has_cycle=True,
                    cycle_path=_cycle_from_back_edge(parent, node, succ),
                )
            if color[succ] == WHITE:
                parent[succ] = node
                color[succ] = GRAY
                stack.append((succ, iter(graph.neighbors(succ))))
                break
        else:
            # every neighbor examined
            color[node] = BLACK
            stack.pop()

    return CycleResult(has_cycle=False, cycle_path=None)


def has_cycle(graph: WeightedGraph, source: NodeId) -> bool:
    """True iff some directed cycle is reachable from *source*."""
    return detect_cycle(graph, source).has_cycle
