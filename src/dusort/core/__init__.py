"""Scanning core: entry classification, size aggregation and ranked reporting."""

from dusort.core.aggregator import NOBACKUP_MARKER, aggregate, leaf_size
from dusort.core.classifier import read_device_id, should_descend
from dusort.core.config import ConfigurationError, ReportConfig, build_report_config
from dusort.core.exceptions import FatalScanError
from dusort.core.reporter import RankedSet, render_report, summarize

__all__ = [
    # Classifier
    "read_device_id",
    "should_descend",
    # Aggregator
    "NOBACKUP_MARKER",
    "aggregate",
    "leaf_size",
    # Reporter
    "RankedSet",
    "render_report",
    "summarize",
    # Configuration and errors
    "ConfigurationError",
    "FatalScanError",
    "ReportConfig",
    "build_report_config",
]
