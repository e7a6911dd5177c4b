"""Recursive size aggregation for one top-level entry.

This module sums the byte length of every regular file reachable under a
directory with support for:
- A `.nobackup` marker file that stands in for its whole directory
- Filesystem-boundary containment through the entry classifier
- Recoverable per-path errors returned as values, never raised
- Depth-first traversal in listing order driven by an explicit stack, so
  deep trees do not depend on the interpreter's recursion limit

Directory cycles through bind mounts or hard-linked directories are not
detected; only symbolic links are refused.
"""

import logging
import stat
from collections.abc import Iterator
from pathlib import Path
from typing import Final

from dusort.core.classifier import should_descend
from dusort.types.aliases import DeviceId
from dusort.types.models import AggregateResult, PathError

logger = logging.getLogger(__name__)

# Sentinel file name; its presence truncates sizing of the enclosing directory
NOBACKUP_MARKER: Final[str] = ".nobackup"

NOT_A_DIRECTORY_MESSAGE: Final[str] = "invalid input: not a directory"


def _is_regular_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def _is_directory(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def leaf_size(path: Path, errors: list[PathError]) -> int:
    """Size contribution of a path handed to the aggregator as a leaf.

    Only paths that are (or resolve to) regular files count; the size is
    read with lstat, so a link contributes its own length. Directories that
    were not descended into, sockets and dangling links contribute zero.
    Any other failure to read the metadata, such as a link loop or a link
    into an unreadable directory, is recorded as a PathError.

    Args:
        path: Leaf path
        errors: List receiving a PathError if metadata cannot be read

    Returns:
        Byte length of the leaf, or 0
    """
    try:
        if not stat.S_ISREG(path.stat().st_mode):
            return 0
        return path.lstat().st_size
    except FileNotFoundError:
        # Dangling link or entry removed mid-scan
        return 0
    except OSError as exc:
        logger.debug(
            "Cannot read file size, counting as zero",
            extra={"path": str(path), "error": str(exc)},
        )
        errors.append(PathError.from_exception(path, exc))
        return 0


def _open_directory(
    directory: Path,
    errors: list[PathError],
) -> tuple[int, Iterator[Path] | None]:
    """Prepare one directory for traversal.

    Returns:
        Tuple of (bytes contributed immediately, iterator over entries to
        visit). The iterator is None when the directory is represented by
        its marker file or could not be listed.
    """
    marker = directory / NOBACKUP_MARKER
    if _is_regular_file(marker):
        logger.debug("Marker found, skipping directory contents", extra={"path": str(directory)})
        return leaf_size(marker, errors), None

    if not _is_directory(directory):
        errors.append(PathError(path=directory, message=NOT_A_DIRECTORY_MESSAGE))
        return 0, None

    try:
        # Materialized so the directory handle is closed before descending
        entries = list(directory.iterdir())
    except OSError as exc:
        logger.debug(
            "Cannot list directory, counting as zero",
            extra={"path": str(directory), "error": str(exc)},
        )
        errors.append(PathError.from_exception(directory, exc))
        return 0, None

    return 0, iter(entries)


def aggregate(
    root: Path,
    containment_device: DeviceId | None = None,
) -> AggregateResult:
    """Calculate the total size of regular files under a directory.

    Every directory on the way, root included, is first checked for a
    `.nobackup` marker; when present, the marker's own size replaces the
    directory's contents. Entries the classifier accepts are descended into,
    everything else is sized as a leaf.

    Args:
        root: Directory to aggregate
        containment_device: Device id to stay on, or None for no containment

    Returns:
        AggregateResult with the byte total and recoverable errors in the
        order they were met

    Examples:
        >>> result = aggregate(Path("/srv/backups"))
        >>> result.total_bytes >= 0
        True
    """
    errors: list[PathError] = []

    total_bytes, entries = _open_directory(root, errors)
    pending: list[Iterator[Path]] = [entries] if entries is not None else []

    while pending:
        entry = next(pending[-1], None)
        if entry is None:
            _ = pending.pop()
            continue

        errors_before = len(errors)
        if should_descend(entry, containment_device, errors=errors):
            contributed, entries = _open_directory(entry, errors)
            total_bytes += contributed
            if entries is not None:
                pending.append(entries)
        elif len(errors) == errors_before:
            total_bytes += leaf_size(entry, errors)

    logger.debug(
        "Aggregation complete",
        extra={"path": str(root), "total_bytes": total_bytes, "errors": len(errors)},
    )

    return AggregateResult(total_bytes=total_bytes, errors=tuple(errors))
