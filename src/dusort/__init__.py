"""dusort - Show the disk usage of each entry in a directory, smallest first.

This package provides the traversal and aggregation engine behind the
``dusort`` command: recursive size summing with `.nobackup` markers and
optional filesystem containment, plus a size-ranked report.
"""

from dusort.app.cli import cli

__all__ = ["cli"]
