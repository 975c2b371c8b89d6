"""weighted-graph CLI entry point.

Usage: uv run weighted-graph [command] FILE [options]
"""
import argparse
import logging
import sys

from weighted_graph.graph.store import (
    MAX_NODES,
    GraphConstructionError,
    NodeOutOfRangeError,
)
from weighted_graph.io.loader import load_engine
from weighted_graph.io.report import (
    format_cycle,
    format_graph,
    format_mst,
    format_path,
    format_report,
)


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", help="Graph file in the sequential adjacency format.")
    p.add_argument(
        "--capacity", type=int, default=MAX_NODES,
        help=f"Maximum number of nodes accepted (default: {MAX_NODES})",
    )
    p.add_argument(
        "--undirected", action="store_true",
        help="Mirror every edge before running queries.",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weighted-graph",
        description="Cycle detection, shortest paths and spanning trees "
                    "on small weighted digraphs.",
    )
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("show", help="Print the loaded graph.")
    _add_common_args(p)

    p = subparsers.add_parser(
        "cycle", help="Report whether a cycle is reachable from a node.",
    )
    _add_common_args(p)
    p.add_argument("--source", type=int, required=True)

    p = subparsers.add_parser(
        "path", help="Find the cheapest path between two nodes.",
    )
    _add_common_args(p)
    p.add_argument("--source", type=int, required=True)
    p.add_argument("--target", type=int, required=True)

    p = subparsers.add_parser(
        "mst", help="Grow a minimum spanning tree from a node.",
    )
    _add_common_args(p)
    p.add_argument("--source", type=int, required=True)

    p = subparsers.add_parser(
        "report", help="Print the graph and every query result.",
    )
    _add_common_args(p)
    p.add_argument(
        "--source", type=int, default=1,
        help="Start node for all queries (default: 1)",
    )
    p.add_argument(
        "--target", type=int, default=0,
        help="End node for the shortest path (default: 0)",
    )

    return parser


def _run(args: argparse.Namespace) -> str:
    engine = load_engine(
        args.file, capacity=args.capacity, undirected=args.undirected,
    )

    if args.command == "show":
        return format_graph(engine.graph)
    if args.command == "cycle":
        return format_cycle(engine.has_cycle(args.source))
    if args.command == "path":
        result = engine.shortest_path(args.source, args.target)
        return format_path(args.source, args.target, result)
    if args.command == "mst":
        return format_mst(engine.minimum_spanning_tree(args.source))
    return format_report(engine, args.source, args.target)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        output = _run(args)
    except (OSError, GraphConstructionError, NodeOutOfRangeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(output)
