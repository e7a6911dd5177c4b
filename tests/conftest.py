"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from tests.fixtures.filesystem_trees import TreeLayout, build_tree


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[TreeLayout], Path]:
    """Build a directory tree under a fresh scan root and return the root."""

    def _make(layout: TreeLayout) -> Path:
        return build_tree(tmp_path / "root", layout)

    return _make


@pytest.fixture
def example_tree(make_tree: Callable[[TreeLayout], Path]) -> Path:
    """Root holding a (500 B), b (1,500 B) and sub/c (2,000,000 B)."""
    return make_tree({"a": 500, "b": 1_500, "sub": {"c": 2_000_000}})


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level changed by configure_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)
