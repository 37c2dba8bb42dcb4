"""Core module exports."""

from lcovreport.core.errors import (
    ConfigError,
    CoverageParseError,
    ErrorCode,
    InternalError,
    LcovReportError,
    PublishError,
    ReportError,
)
from lcovreport.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ConfigError",
    "CoverageParseError",
    "ErrorCode",
    "InternalError",
    "LcovReportError",
    "PublishError",
    "ReportError",
    # Logging
    "configure_logging",
    "get_logger",
]
