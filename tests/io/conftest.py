"""Shared fixtures for loader, report and CLI tests."""
from __future__ import annotations

from pathlib import Path

import pytest

TRIANGLE_TEXT = """\
0;
1, 0 5, 2 3;
2, 0 1;
"""


@pytest.fixture
def triangle_text() -> str:
    return TRIANGLE_TEXT


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    path = tmp_path / "graphinfo.txt"
    path.write_text(TRIANGLE_TEXT)
    return path
