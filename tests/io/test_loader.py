"""Tests for the adjacency text loader."""
from __future__ import annotations

import logging
import math
from pathlib import Path

import pytest

from weighted_graph.graph.store import (
    CapacityExceededError,
    GraphConstructionError,
)
from weighted_graph.io.loader import (
    GraphFormatError,
    load_engine,
    load_graph,
    parse_engine,
    parse_graph,
)


class TestParseGraph:
    def test_triangle(self, triangle_text: str) -> None:
        g = parse_graph(triangle_text)
        assert g.node_count == 3
        assert list(g.edges()) == [(1, 0, 5.0), (1, 2, 3.0), (2, 0, 1.0)]

    def test_whitespace_insensitive(self) -> None:
        g = parse_graph("0 ,1 2.5 ;1;\n\n  2\n, 0   1\n,1 4\n;")
        assert g.node_count == 3
        assert g.neighbors(0) == ((1, 2.5),)
        assert g.neighbors(2) == ((0, 1.0), (1, 4.0))

    def test_final_separator_optional(self) -> None:
        g = parse_graph("0, 1 1; 1, 0 2")
        assert g.node_count == 2
        assert g.neighbors(1) == ((0, 2.0),)

    def test_empty_text(self) -> None:
        assert parse_graph("").node_count == 0
        assert parse_graph("  \n").node_count == 0

    def test_out_of_range_destination_dropped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            g = parse_graph("0, 1 1, 7 2;\n1, -3 1;")
        assert g.edge_count == 1
        assert g.dropped_edges == 2
        assert "Dropping edge 0 -> 7" in caplog.text

    def test_forward_reference_kept(self) -> None:
        """Destinations may name nodes whose record comes later."""
        g = parse_graph("0, 2 1;\n1;\n2;")
        assert g.has_edge(0, 2)
        assert g.dropped_edges == 0


class TestParseErrors:
    def test_not_sequential(self) -> None:
        with pytest.raises(GraphFormatError, match="sequential") as exc_info:
            parse_graph("0;\n2;\n")
        assert exc_info.value.record == 2

    def test_must_start_at_zero(self) -> None:
        with pytest.raises(GraphFormatError, match="expected 0, got 1"):
            parse_graph("1;")

    def test_bad_node_number(self) -> None:
        with pytest.raises(GraphFormatError, match="invalid node number"):
            parse_graph("zero;")

    def test_bad_neighbor_group(self) -> None:
        with pytest.raises(GraphFormatError, match="destination weight"):
            parse_graph("0, 1;")
        with pytest.raises(GraphFormatError, match="destination weight"):
            parse_graph("0, 1 2 3;")

    def test_bad_neighbor_numbers(self) -> None:
        with pytest.raises(GraphFormatError, match="invalid neighbor"):
            parse_graph("0, x 2;")
        with pytest.raises(GraphFormatError, match="invalid neighbor"):
            parse_graph("0, 0 heavy;")

    def test_empty_record(self) -> None:
        with pytest.raises(GraphFormatError, match="empty record") as exc_info:
            parse_graph("0;;1;")
        assert exc_info.value.record == 2

    def test_format_error_is_construction_error(self) -> None:
        with pytest.raises(GraphConstructionError):
            parse_graph("5;")

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(GraphConstructionError, match="invalid weight"):
            parse_graph("0, 0 -1;")

    def test_too_many_nodes(self) -> None:
        text = "".join(f"{i};" for i in range(5))
        with pytest.raises(CapacityExceededError):
            parse_graph(text, capacity=4)
        assert parse_graph(text, capacity=5).node_count == 5

    def test_default_capacity(self) -> None:
        text = "".join(f"{i};" for i in range(101))
        with pytest.raises(CapacityExceededError, match="101 exceeds capacity 100"):
            parse_graph(text)


class TestLoadGraph:
    def test_load(self, graph_file: Path) -> None:
        g = load_graph(graph_file)
        assert g.node_count == 3
        assert g.edge_count == 3

    def test_load_str_path(self, graph_file: Path) -> None:
        assert load_graph(str(graph_file)).node_count == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "nope.txt")

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"0, 1 \xff;")
        with pytest.raises(GraphConstructionError, match="not valid UTF-8") as exc_info:
            load_graph(path)
        assert "0xff" in str(exc_info.value)
        assert exc_info.value.__cause__ is None


class TestLoadEngine:
    def test_parse_engine(self, triangle_text: str) -> None:
        engine = parse_engine(triangle_text)
        assert engine.shortest_path(1, 0).path == [1, 2, 0]

    def test_parse_engine_undirected(self, triangle_text: str) -> None:
        engine = parse_engine(triangle_text, undirected=True)
        result = engine.shortest_path(0, 1)
        assert result.path == [0, 2, 1]
        assert result.cost == pytest.approx(4.0)
        assert engine.has_cycle(0)

    def test_load_engine(self, graph_file: Path) -> None:
        engine = load_engine(graph_file)
        assert engine.node_count == 3
        assert math.isinf(engine.shortest_path(0, 1).cost)

    def test_load_engine_capacity(self, graph_file: Path) -> None:
        with pytest.raises(CapacityExceededError):
            load_engine(graph_file, capacity=2)
