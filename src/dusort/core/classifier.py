"""Entry classification: which paths the aggregator may descend into."""

import logging
import stat
from pathlib import Path

from dusort.types.aliases import DeviceId
from dusort.types.models import PathError

logger = logging.getLogger(__name__)


def should_descend(
    path: Path,
    containment_device: DeviceId | None = None,
    *,
    errors: list[PathError] | None = None,
) -> bool:
    """Decide whether a path is eligible for recursive descent.

    Metadata is read without following symbolic links, so a link to a
    directory is never descended into.

    Args:
        path: Entry to classify
        containment_device: Device id of the scan root when filesystem
            containment is enabled, None otherwise
        errors: Optional list receiving a PathError if metadata cannot be read

    Returns:
        True only for a real directory (not a symlink) that, under
        containment, lives on the same device as the scan root
    """
    try:
        st = path.lstat()
    except OSError as exc:
        logger.debug(
            "Cannot read metadata, not descending",
            extra={"path": str(path), "error": str(exc)},
        )
        if errors is not None:
            errors.append(PathError.from_exception(path, exc))
        return False

    if stat.S_ISLNK(st.st_mode) or not stat.S_ISDIR(st.st_mode):
        return False

    if containment_device is not None and st.st_dev != containment_device:
        logger.debug(
            "Directory on another filesystem, not descending",
            extra={"path": str(path), "device": st.st_dev},
        )
        return False

    return True


def read_device_id(path: Path) -> DeviceId:
    """Return the filesystem device id of a path.

    Raises:
        OSError: If the path's metadata cannot be read
    """
    return path.stat().st_dev
