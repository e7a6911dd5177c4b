"""Report configuration for dusort.

This module implements the resolved configuration consumed by the reporter,
validated with Pydantic so that invalid values fail fast with actionable,
field-level error messages. Values come from the command line only; there
is no configuration file.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dusort.utils.logging import DEFAULT_LOG_LEVEL

class ReportConfig(BaseModel):
    """Configuration for a single summarize invocation.

    The two reporting switches are independent:
    - bytes_only: render raw byte counts instead of scaled units
    - stay_on_filesystem: do not descend onto other mounted volumes
    """

    model_config = ConfigDict(frozen=True)

    directory: Annotated[
        Path,
        Field(description="Directory whose immediate children are reported"),
    ] = Path(".")
    bytes_only: Annotated[
        bool,
        Field(description="Print raw byte counts instead of human-readable sizes"),
    ] = False
    stay_on_filesystem: Annotated[
        bool,
        Field(description="Only descend into directories on the scan root's filesystem"),
    ] = False
    log_level: Annotated[
        str,
        Field(
            description="Diagnostics logging level",
            pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        ),
    ] = DEFAULT_LOG_LEVEL

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Normalize log level to uppercase before pattern validation.

        Args:
            v: Raw log level value

        Returns:
            Uppercased, stripped string or the value unchanged if not a string
        """
        if isinstance(v, str):
            return v.strip().upper()
        return v


class ConfigurationError(Exception):
    """Exception raised when report configuration values are invalid."""


def build_report_config(**values: object) -> ReportConfig:
    """Validate raw option values into a ReportConfig.

    Args:
        **values: Field values, typically parsed command-line options

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If any value fails validation

    Examples:
        >>> build_report_config(directory=Path("/srv"), bytes_only=True).bytes_only
        True
    """
    try:
        return ReportConfig.model_validate(values)
    except ValidationError as e:
        error_lines = ["Configuration validation failed:", ""]
        for error in e.errors():
            field_path = " → ".join(str(loc) for loc in error["loc"])
            error_lines.append(f"  Field: {field_path}")
            error_lines.append(f"  Error: {error['msg']}")
            error_lines.append(f"  Type: {error['type']}")
            error_lines.append("")

        error_lines.append("Please fix the above errors and try again.")

        msg = "\n".join(error_lines)
        raise ConfigurationError(msg) from e
