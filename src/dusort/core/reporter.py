"""Ranked reporting of per-child sizes for a directory.

This module turns a directory into a size-ordered report: each immediate
child is sized (recursively for directories), ranked ascending, and rendered
with a pluggable size formatter followed by a grand total.
"""

import bisect
import logging
from collections.abc import Iterator
from pathlib import Path

from dusort.core.aggregator import aggregate
from dusort.core.classifier import read_device_id, should_descend
from dusort.core.config import ReportConfig
from dusort.core.exceptions import FatalScanError
from dusort.types.aliases import DeviceId, SizeFormatter
from dusort.types.models import PathError, Report, ScanTarget
from dusort.utils.logging import clear_scan_root, log_with_context, set_scan_root

logger = logging.getLogger(__name__)


def _rank_key(target: ScanTarget) -> tuple[int, str]:
    return (target.size, str(target.path))


class RankedSet:
    """Ordered collection of scan targets, ascending by size.

    Ties on size are broken by path text so the order is total: two distinct
    entries of equal size are both kept. Adding the same (size, path) pair a
    second time leaves the set unchanged.
    """

    def __init__(self) -> None:
        self._keys: list[tuple[int, str]] = []
        self._targets: list[ScanTarget] = []

    def add(self, target: ScanTarget) -> bool:
        """Insert a target at its ranked position.

        Returns:
            True if inserted, False if an identical entry was already present
        """
        key = _rank_key(target)
        index = bisect.bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return False

        self._keys.insert(index, key)
        self._targets.insert(index, target)
        return True

    def __iter__(self) -> Iterator[ScanTarget]:
        return iter(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, target: object) -> bool:
        if not isinstance(target, ScanTarget):
            return False
        key = _rank_key(target)
        index = bisect.bisect_left(self._keys, key)
        return index < len(self._keys) and self._keys[index] == key


def _own_size(path: Path, errors: list[PathError]) -> int:
    """Size of a top-level child that is not descended into, via lstat."""
    try:
        return path.lstat().st_size
    except OSError as exc:
        logger.debug(
            "Cannot read entry size, counting as zero",
            extra={"path": str(path), "error": str(exc)},
        )
        errors.append(PathError.from_exception(path, exc))
        return 0


def _size_child(
    child: Path,
    containment_device: DeviceId | None,
    errors: list[PathError],
) -> int:
    errors_before = len(errors)

    if should_descend(child, containment_device, errors=errors):
        result = aggregate(child, containment_device)
        errors.extend(result.errors)
        return result.total_bytes

    # Metadata already unreadable; the classifier recorded the error
    if len(errors) > errors_before:
        return 0

    return _own_size(child, errors)


def summarize(directory: Path, config: ReportConfig) -> Report:
    """Size every immediate child of a directory and rank the results.

    Args:
        directory: Scan root
        config: Resolved report configuration; only stay_on_filesystem
            influences the scan, bytes_only is a rendering concern

    Returns:
        Report with targets in ascending size order and every recoverable
        error met during the scan

    Raises:
        FatalScanError: If the root cannot be listed, or containment is
            enabled and the root's device id cannot be read
    """
    token = set_scan_root(str(directory))
    try:
        containment_device: DeviceId | None = None
        if config.stay_on_filesystem:
            try:
                containment_device = read_device_id(directory)
            except OSError as exc:
                raise FatalScanError(directory, PathError.from_exception(directory, exc).message) from exc

        try:
            children = list(directory.iterdir())
        except OSError as exc:
            raise FatalScanError(directory, PathError.from_exception(directory, exc).message) from exc

        errors: list[PathError] = []
        ranked = RankedSet()
        for child in children:
            size = _size_child(child, containment_device, errors)
            _ = ranked.add(ScanTarget(path=child, size=size))

        report = Report(directory=directory, targets=tuple(ranked), errors=tuple(errors))

        log_with_context(
            logger,
            logging.INFO,
            "Scan complete",
            extra={
                "entries": len(report.targets),
                "total_bytes": report.total_bytes,
                "error_count": len(report.errors),
                "containment": containment_device is not None,
            },
        )

        return report
    finally:
        clear_scan_root(token)


def render_report(report: Report, formatter: SizeFormatter) -> list[str]:
    """Render a report as output lines.

    One ``<size> <path>`` line per target in ranked order, an empty line,
    then ``<size> total``. The total is summed from exact byte counts before
    formatting.

    Examples:
        >>> render_report(report, format_human_readable)
        ['    500B a', '      1K b', '      2M sub', '', '      2M total']
    """
    lines = [f"{formatter(target.size)} {target.path}" for target in report.targets]
    lines.append("")
    lines.append(f"{formatter(report.total_bytes)} total")
    return lines
