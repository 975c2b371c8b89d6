"""Reader for the sequential adjacency text format.

A graph file is a run of records terminated by ``;``.  Each record is a
node number followed by zero or more ``, destination weight`` groups::

    0;
    1, 0 5, 2 3;
    2, 0 1;

Node numbers must appear in order starting at 0, so the number of
records is the node count.  Whitespace and newlines between tokens are
not significant, and the final ``;`` may be omitted.

Destinations outside the node range are dropped by the store (counted
and logged) rather than failing the load.
"""
from __future__ import annotations

import logging
import os

from weighted_graph.graph.engine import GraphEngine
from weighted_graph.graph.store import (
    MAX_NODES,
    GraphConstructionError,
    WeightedGraph,
)
from weighted_graph.graph.symmetrize import make_undirected
from weighted_graph.graph.types import NodeId, Weight

log = logging.getLogger(__name__)

RECORD_SEP = ";"
GROUP_SEP = ","


class GraphFormatError(GraphConstructionError):
    """Raised when graph text does not follow the adjacency format."""

    def __init__(self, record: int, message: str) -> None:
        self.record = record
        super().__init__(f"Record {record}: {message}")


def _parse_record(
    index: int, raw: str
) -> tuple[NodeId, list[tuple[NodeId, Weight]]]:
    head, *groups = raw.split(GROUP_SEP)
    head = head.strip()
    try:
        node = int(head)
    except ValueError:
        raise GraphFormatError(index, f"invalid node number {head!r}") from None

    nbrs: list[tuple[NodeId, Weight]] = []
    for group in groups:
        tokens = group.split()
        if len(tokens) != 2:
            raise GraphFormatError(
                index,
                f"expected 'destination weight', got {group.strip()!r}",
            )
        try:
            nbrs.append((int(tokens[0]), float(tokens[1])))
        except ValueError:
            raise GraphFormatError(
                index, f"invalid neighbor {group.strip()!r}"
            ) from None
    return node, nbrs


def parse_graph(text: str, capacity: int = MAX_NODES) -> WeightedGraph:
    """Build a WeightedGraph from adjacency text.

    Raises GraphFormatError on malformed or out-of-sequence records and
    CapacityExceededError if there are more records than *capacity*.
    """
    chunks = text.split(RECORD_SEP)
    if chunks and not chunks[-1].strip():
        chunks.pop()

    records: list[list[tuple[NodeId, Weight]]] = []
    for i, raw in enumerate(chunks, start=1):
        if not raw.strip():
            raise GraphFormatError(i, "empty record")
        node, nbrs = _parse_record(i, raw)
        if node != len(records):
            raise GraphFormatError(
                i,
                f"node numbers must be sequential from 0: "
                f"expected {len(records)}, got {node}",
            )
        records.append(nbrs)

    graph = WeightedGraph.from_adjacency(records, capacity=capacity)
    log.debug(
        "Parsed %d node(s), %d edge(s), dropped %d",
        graph.node_count, graph.edge_count, graph.dropped_edges,
    )
    return graph


def load_graph(
    path: str | os.PathLike[str], capacity: int = MAX_NODES
) -> WeightedGraph:
    """Read *path* and parse it with parse_graph.

    A missing or unreadable file raises the OSError from open().  Bytes
    that are not valid UTF-8 raise GraphConstructionError.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise GraphConstructionError(
            f"{os.fspath(path)}: not valid UTF-8 text "
            f"(byte {exc.object[exc.start]:#04x} at offset {exc.start})"
        ) from None
    log.debug("Loading graph from %s", path)
    return parse_graph(text, capacity=capacity)


def parse_engine(
    text: str,
    capacity: int = MAX_NODES,
    undirected: bool = False,
) -> GraphEngine:
    """Parse adjacency text into a GraphEngine, mirroring edges if asked."""
    graph = parse_graph(text, capacity=capacity)
    return GraphEngine(make_undirected(graph) if undirected else graph)


def load_engine(
    path: str | os.PathLike[str],
    capacity: int = MAX_NODES,
    undirected: bool = False,
) -> GraphEngine:
    """Load a graph file into a GraphEngine, mirroring edges if asked."""
    graph = load_graph(path, capacity=capacity)
    return GraphEngine(make_undirected(graph) if undirected else graph)
