"""Logging infrastructure with scan-root context tracking.

This module configures standard-library logging for dusort. Diagnostics go
to stderr so the report written to stdout stays machine-readable. The root
directory of the scan in progress is held in a ContextVar and stamped onto
every record by a filter, so log lines from deep inside the traversal still
say which scan they belong to.
"""

import contextvars
import logging
import sys
from collections.abc import Mapping
from typing import Final, TextIO, override

# Scan root context variable, set by the reporter for the duration of a scan
scan_root_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "scan_root",
    default=None,
)

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(scan_root)s] - %(message)s"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


class ScanRootFilter(logging.Filter):
    """Logging filter that adds the active scan root to log records."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add scan root to log record from ContextVar.

        Args:
            record: Log record to enhance with the scan root

        Returns:
            True to allow the record to be logged
        """
        scan_root = scan_root_var.get()
        record.scan_root = scan_root if scan_root is not None else "-"
        return True


def configure_logging(
    *,
    log_level: str = DEFAULT_LOG_LEVEL,
    stream: TextIO | None = None,
) -> None:
    """Configure application logging with a single console handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        stream: Output stream for log records (default: sys.stderr)

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logger = logging.getLogger(__name__)
        >>> logger.debug("Descending", extra={"path": "/srv"})
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
    console_handler.addFilter(ScanRootFilter())

    root_logger.addHandler(console_handler)


def set_scan_root(scan_root: str) -> contextvars.Token[str | None]:
    """Set the scan root for the current context.

    Returns:
        Token that restores the previous value when passed to clear_scan_root
    """
    return scan_root_var.set(scan_root)


def get_scan_root() -> str | None:
    """Get the current scan root from context."""
    return scan_root_var.get()


def clear_scan_root(token: contextvars.Token[str | None] | None = None) -> None:
    """Clear the scan root, restoring the previous value when a token is given."""
    if token is not None:
        scan_root_var.reset(token)
    else:
        _ = scan_root_var.set(None)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    *,
    extra: Mapping[str, object] | None = None,
) -> None:
    """Log a message with additional context fields.

    Automatically includes the scan root from the ContextVar.

    Args:
        logger: Logger instance to use
        level: Logging level (e.g., logging.INFO)
        message: Log message
        extra: Additional context fields to include in log

    Example:
        >>> log_with_context(
        ...     logging.getLogger(__name__),
        ...     logging.INFO,
        ...     "Scan complete",
        ...     extra={"entries": 12, "total_bytes": 4096},
        ... )
    """
    context = dict(extra) if extra else {}

    scan_root = get_scan_root()
    if scan_root:
        context["scan_root_path"] = scan_root

    logger.log(level, message, extra=context)
