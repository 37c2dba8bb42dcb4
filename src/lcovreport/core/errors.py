"""lcov-report error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Report (parsing and aggregation)
- 4xxx: Publish
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003
    CONFIG_FILE_NOT_FOUND = 2004

    # Report (3xxx)
    REPORT_PARSE_ERROR = 3001
    REPORT_NO_RECORDS = 3002

    # Publish (4xxx)
    PUBLISH_HTTP_ERROR = 4001
    PUBLISH_TRANSPORT_ERROR = 4002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class LcovReportError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'REPORT_NO_RECORDS')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(LcovReportError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ReportError(LcovReportError):
    """Errors raised while turning a tracefile into a report."""

    @classmethod
    def no_records(cls, path: str) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_NO_RECORDS,
            message=f"File at {path} has no coverage records.",
            details={"path": path},
        )


class CoverageParseError(ReportError):
    """Tracefile could not be read, or failed strict validation."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "CoverageParseError":
        return cls(
            code=ErrorCode.REPORT_PARSE_ERROR,
            message=f"Failed to read LCOV file {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_line(cls, line_no: int, line: str, reason: str) -> "CoverageParseError":
        return cls(
            code=ErrorCode.REPORT_PARSE_ERROR,
            message=f"Line {line_no}: {reason}: {line!r}",
            details={"line_no": line_no, "line": line, "reason": reason},
        )


class PublishError(LcovReportError):
    """Errors talking to the comment API."""

    @classmethod
    def http_error(cls, method: str, url: str, status: int, body: str) -> "PublishError":
        return cls(
            code=ErrorCode.PUBLISH_HTTP_ERROR,
            message=f"{method} {url} failed with status {status}",
            retryable=status >= 500,
            details={"method": method, "url": url, "status": status, "body": body},
        )

    @classmethod
    def transport_error(cls, method: str, url: str, reason: str) -> "PublishError":
        return cls(
            code=ErrorCode.PUBLISH_TRANSPORT_ERROR,
            message=f"{method} {url} failed: {reason}",
            retryable=True,
            details={"method": method, "url": url, "reason": reason},
        )


class InternalError(LcovReportError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
