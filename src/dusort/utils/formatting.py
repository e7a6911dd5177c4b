"""Pure formatting utilities for size columns in the report.

This module provides stateless formatting functions for converting raw byte
counts into fixed-width display strings. All functions are pure with no side
effects; they only affect display and never the summed totals.
"""

from typing import Final

from dusort.types.aliases import SizeFormatter

# Decimal unit suffixes (1000-based), smallest first
_SUFFIXES: Final[tuple[str, ...]] = ("B", "K", "M", "G", "T")
_UNIT: Final[int] = 1000

# Column widths
HUMAN_WIDTH: Final[int] = 7
BYTES_WIDTH: Final[int] = 12


def format_human_readable(size: int) -> str:
    """Convert bytes to a scaled, right-justified size with a unit suffix.

    Uses decimal units (1000-based). The value is truncated, not rounded, and
    the suffix follows the number without a space.

    Args:
        size: Number of bytes to format (must be non-negative)

    Returns:
        Value right-justified to 7 characters followed by one of B, K, M, G, T.
        Magnitudes beyond the terabyte range keep the T suffix and are not
        scaled further.

    Examples:
        >>> format_human_readable(500)
        '    500B'
        >>> format_human_readable(1500)
        '      1K'
        >>> format_human_readable(2_000_000)
        '      2M'
        >>> format_human_readable(5 * 1000**5)
        '   5000T'
    """
    if size < 0:
        msg = "size must be non-negative"
        raise ValueError(msg)

    for exponent, suffix in enumerate(_SUFFIXES):
        if size < _UNIT ** (exponent + 1):
            return f"{size // _UNIT**exponent:>{HUMAN_WIDTH}}{suffix}"

    # Largest suffix reached: no further scaling
    last = len(_SUFFIXES) - 1
    return f"{size // _UNIT**last:>{HUMAN_WIDTH}}{_SUFFIXES[last]}"


def format_bytes(size: int) -> str:
    """Render the raw decimal byte count right-justified to 12 characters.

    Examples:
        >>> format_bytes(1500)
        '        1500'
    """
    if size < 0:
        msg = "size must be non-negative"
        raise ValueError(msg)

    return f"{size:>{BYTES_WIDTH}}"


def select_formatter(bytes_only: bool) -> SizeFormatter:
    """Pick the size formatting strategy for a report."""
    return format_bytes if bytes_only else format_human_readable
