"""Type definitions for dusort.

This package provides:
- Data models (immutable dataclasses)
- Type aliases (PEP 695 modern syntax)
"""

from dusort.types.aliases import DeviceId, SizeFormatter
from dusort.types.models import AggregateResult, PathError, Report, ScanTarget

__all__ = [
    # Type aliases
    "DeviceId",
    "SizeFormatter",
    # Data models
    "AggregateResult",
    "PathError",
    "Report",
    "ScanTarget",
]
