"""Tests for error types and codes."""

import pytest

from lcovreport.core.errors import (
    ConfigError,
    CoverageParseError,
    ErrorCode,
    InternalError,
    LcovReportError,
    PublishError,
    ReportError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_FILE_NOT_FOUND, 2000),
            (ErrorCode.REPORT_PARSE_ERROR, 3000),
            (ErrorCode.REPORT_NO_RECORDS, 3000),
            (ErrorCode.PUBLISH_HTTP_ERROR, 4000),
            (ErrorCode.PUBLISH_TRANSPORT_ERROR, 4000),
            (ErrorCode.INTERNAL_ERROR, 9000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestLcovReportError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = LcovReportError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_includes_code_and_name(self) -> None:
        """String form carries numeric code, name and message."""
        error = LcovReportError(code=ErrorCode.INTERNAL_ERROR, message="boom")

        assert str(error) == "[9001] INTERNAL_ERROR: boom"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Errors are real exceptions."""
        with pytest.raises(LcovReportError):
            raise InternalError.unexpected("oops", where="test")


class TestFactories:
    """Classmethod constructors."""

    def test_config_invalid_value(self) -> None:
        error = ConfigError.invalid_value("github.pr_number", 0, "must be >= 1")

        assert error.code == ErrorCode.CONFIG_INVALID_VALUE
        assert error.details == {
            "field": "github.pr_number",
            "value": "0",
            "reason": "must be >= 1",
        }

    def test_config_missing_required(self) -> None:
        error = ConfigError.missing_required("github.token")

        assert error.message == "Missing required config field: github.token"

    def test_no_records_message(self) -> None:
        error = ReportError.no_records("coverage/lcov.info")

        assert error.code == ErrorCode.REPORT_NO_RECORDS
        assert error.message == "File at coverage/lcov.info has no coverage records."

    def test_parse_error_is_report_error(self) -> None:
        error = CoverageParseError.invalid_line(4, "DA:-1,1", "bad line")

        assert isinstance(error, ReportError)
        assert error.details["line_no"] == 4
        assert "Line 4" in error.message

    @pytest.mark.parametrize(("status", "retryable"), [(404, False), (422, False), (502, True)])
    def test_http_error_retryable_only_for_server_errors(
        self, status: int, retryable: bool
    ) -> None:
        error = PublishError.http_error("GET", "/repos/a/b", status, "body")

        assert error.retryable is retryable
        assert error.details["status"] == status

    def test_transport_error_is_retryable(self) -> None:
        assert PublishError.transport_error("POST", "/x", "reset").retryable
