"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (LCOVREPORT__SECTION__KEY)
3. Repo YAML (.lcovreport.yaml, or the file passed with --config)
4. Global YAML (~/.config/lcovreport/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    LCOVREPORT__<SECTION>__<KEY>=<VALUE>

Examples:
    LCOVREPORT__LOGGING__LEVEL=DEBUG
    LCOVREPORT__REPORT__LCOV_PATH=build/coverage.info
    LCOVREPORT__GITHUB__PR_NUMBER=42
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_MARKER = "<!-- coverage-report -->"


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        LCOVREPORT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ReportConfig(BaseModel):
    """Report rendering configuration.

    Env vars:
        LCOVREPORT__REPORT__LCOV_PATH: Tracefile to read when no path is given
        LCOVREPORT__REPORT__TITLE: Heading of the published comment
        LCOVREPORT__REPORT__MARKER: Hidden marker used to find a previous comment
    """

    lcov_path: str = Field(
        default="coverage/lcov.info",
        description="Tracefile to read when the command line does not name one.",
    )
    title: str = Field(
        default="Code Coverage",
        description="Heading rendered above the summary.",
    )
    marker: str = Field(
        default=DEFAULT_MARKER,
        description="Text embedded in the comment body. Changing it orphans earlier comments.",
    )

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Marker must not be empty")
        return v


class GitHubConfig(BaseModel):
    """GitHub comment publishing configuration.

    Env vars:
        LCOVREPORT__GITHUB__TOKEN: API token
        LCOVREPORT__GITHUB__REPOSITORY: owner/name
        LCOVREPORT__GITHUB__PR_NUMBER: Pull request to comment on
        LCOVREPORT__GITHUB__API_URL: API root (GitHub Enterprise)
    """

    token: str | None = None
    repository: str | None = None
    pr_number: int | None = Field(default=None, ge=1)
    api_url: str = "https://api.github.com"
    timeout_sec: float = Field(
        default=30.0,
        description="Per-request timeout. Requests are not retried.",
    )

    @field_validator("repository")
    @classmethod
    def validate_repository(cls, v: str | None) -> str | None:
        if v is None:
            return v
        owner, sep, name = v.partition("/")
        if not sep or not owner or not name or "/" in name:
            raise ValueError(f"Repository must look like 'owner/name', got {v!r}")
        return v

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class LcovReportConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
