"""Application module for dusort."""

from __future__ import annotations

from dusort.app.cli import cli

__all__ = [
    "cli",
]
