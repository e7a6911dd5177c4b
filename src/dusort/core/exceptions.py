"""Exceptions raised by the scanning core."""

from pathlib import Path


class FatalScanError(Exception):
    """Exception raised when a scan cannot produce any report.

    Raised when the scan root itself cannot be listed or is not a directory,
    or when containment is enabled and the root's device cannot be read.
    Per-entry failures below the root never raise this; they are recorded
    as PathError values instead.
    """

    def __init__(self, path: Path, message: str) -> None:
        """Initialize FatalScanError.

        Args:
            path: Scan root that could not be processed
            message: Description of the underlying failure
        """
        super().__init__(f"{path}: {message}")
        self.path: Path = path
        self.message: str = message
