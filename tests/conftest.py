"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import itertools
from collections.abc import Callable
from pathlib import Path

import pytest

from graphpoet.graph import Graph, get_graph


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_dir(project_root: Path) -> Path:
    """Return the data directory."""
    return project_root / "data"


@pytest.fixture
def corpus_file(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory that writes corpus text to a temporary file."""
    counter = itertools.count()

    def _write(contents: str) -> Path:
        path = tmp_path / f"corpus-{next(counter)}.txt"
        path.write_text(contents, encoding="utf-8")
        return path

    return _write


@pytest.fixture(params=["vertices", "edges"])
def graph(request) -> Graph[str]:
    """Return a new empty graph, once per representation."""
    return get_graph(request.param)
