"""Shared type aliases for the graph package."""
from __future__ import annotations

from typing import TypeAlias

NodeId: TypeAlias = int
Weight: TypeAlias = float
EdgeTuple: TypeAlias = tuple[NodeId, NodeId, Weight]
TreeEdge: TypeAlias = tuple[NodeId, NodeId]   # (parent, child)
