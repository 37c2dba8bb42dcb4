"""Config module exports."""

from lcovreport.config.loader import load_config
from lcovreport.config.models import (
    GitHubConfig,
    LcovReportConfig,
    LoggingConfig,
    ReportConfig,
)

__all__ = [
    "load_config",
    "LcovReportConfig",
    "GitHubConfig",
    "LoggingConfig",
    "ReportConfig",
]
