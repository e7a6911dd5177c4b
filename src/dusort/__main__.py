"""Application entry point for dusort.

Runs the click command in standalone mode, which maps outcomes to exit
codes itself:
- 0: report printed (recoverable per-entry errors do not change this)
- 1: fatal scan error (unreadable scan root or root device)
- 2: invalid command-line arguments
"""

from __future__ import annotations

from dusort.app.cli import cli

__all__ = ["main"]


def main() -> None:
    """Main entry point for the dusort command."""
    cli(prog_name="dusort")


if __name__ == "__main__":
    main()
