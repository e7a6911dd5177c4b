"""Data models for dusort.

This module defines immutable dataclasses passed between the classifier,
the aggregator and the reporter. Recoverable errors travel as values inside
these models rather than being written to a global stream.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Self


@dataclass(slots=True, frozen=True)
class PathError:
    """Recoverable error tied to a single filesystem path.

    Produced whenever metadata or a directory listing cannot be read. The
    affected entry contributes zero bytes and the scan continues.
    """

    path: Path
    message: str

    @classmethod
    def from_exception(cls, path: Path, exc: BaseException) -> Self:
        """Build an error from a caught exception.

        OSError carries its own filename in str(); only strerror is kept when
        available so the rendered line does not repeat the path.
        """
        if isinstance(exc, OSError) and exc.strerror:
            return cls(path=path, message=exc.strerror)
        return cls(path=path, message=str(exc))

    def render(self) -> str:
        """Render as an error-channel line: ``<path>: <message>``."""
        return f"{self.path}: {self.message}"


@dataclass(slots=True, frozen=True)
class AggregateResult:
    """Byte total of a subtree plus the recoverable errors met while summing it.

    Results compose with ``+`` so callers never share a mutable accumulator.
    """

    total_bytes: int = 0
    errors: tuple[PathError, ...] = ()

    def __add__(self, other: "AggregateResult") -> "AggregateResult":
        return AggregateResult(
            total_bytes=self.total_bytes + other.total_bytes,
            errors=self.errors + other.errors,
        )


@dataclass(slots=True, frozen=True)
class ScanTarget:
    """One top-level reportable entry and its aggregated size."""

    path: Path
    size: int


@dataclass(slots=True, frozen=True)
class Report:
    """Ranked result of summarizing a directory."""

    directory: Path
    targets: tuple[ScanTarget, ...]
    errors: tuple[PathError, ...] = ()

    @property
    def total_bytes(self) -> int:
        """Exact sum of every reported entry's size."""
        return sum(target.size for target in self.targets)
