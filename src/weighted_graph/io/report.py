"""Plain-text rendering of graphs and query results.

Output is line-oriented so it reads well in a terminal and diffs
cleanly: the edge list, then the cycle verdict, the shortest path one
node per line, and the spanning tree edges.
"""
from __future__ import annotations

from weighted_graph.graph.engine import GraphEngine
from weighted_graph.graph.shortest_path import PathResult
from weighted_graph.graph.store import WeightedGraph
from weighted_graph.graph.types import NodeId, TreeEdge


def _fmt_weight(weight: float) -> str:
    return f"{weight:g}"


def format_graph(graph: WeightedGraph) -> str:
    """Node range followed by one (src, dst, weight) line per edge."""
    if graph.node_count:
        lines = [f"nodes 0 to {graph.node_count - 1}"]
    else:
        lines = ["no nodes"]
    lines.append("edges:")
    for src, dst, weight in graph.edges():
        lines.append(f"({src}, {dst}, {_fmt_weight(weight)})")
    return "\n".join(lines)


def format_cycle(has_cycle: bool) -> str:
    return "has cycle" if has_cycle else "no cycle"


def format_path(source: NodeId, target: NodeId, result: PathResult) -> str:
    lines = [
        f"shortest path between {source} and {target}, "
        f"cost {_fmt_weight(result.cost)}:"
    ]
    if result.reachable:
        lines.extend(str(node) for node in result.path)
    else:
        lines.append("none")
    return "\n".join(lines)


def format_mst(edges: list[TreeEdge]) -> str:
    lines = ["edges in MST:"]
    lines.extend(f"({parent}, {child})" for parent, child in edges)
    return "\n".join(lines)


def format_report(engine: GraphEngine, source: NodeId, target: NodeId) -> str:
    """Full report: graph, cycle check, shortest path, and MST from *source*."""
    sections = [
        format_graph(engine.graph),
        format_cycle(engine.has_cycle(source)),
        format_path(source, target, engine.shortest_path(source, target)),
        format_mst(engine.minimum_spanning_tree(source)),
    ]
    return "\n\n".join(sections)
