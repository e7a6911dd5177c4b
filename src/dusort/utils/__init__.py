"""Shared utility modules.

This package provides:
- Size formatting strategies (bytes to fixed-width display text)
- Logging setup with scan-root context tracking
"""

from dusort.utils.formatting import (
    format_bytes,
    format_human_readable,
    select_formatter,
)

__all__ = [
    "format_bytes",
    "format_human_readable",
    "select_formatter",
]
