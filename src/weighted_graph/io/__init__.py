"""Text loading and rendering for weighted graphs."""

from weighted_graph.io.loader import (
    GraphFormatError,
    load_engine,
    load_graph,
    parse_engine,
    parse_graph,
)
from weighted_graph.io.report import (
    format_cycle,
    format_graph,
    format_mst,
    format_path,
    format_report,
)

__all__ = [
    "GraphFormatError",
    "format_cycle",
    "format_graph",
    "format_mst",
    "format_path",
    "format_report",
    "load_engine",
    "load_graph",
    "parse_engine",
    "parse_graph",
]
