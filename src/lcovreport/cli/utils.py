"""CLI utilities."""

import json
from pathlib import Path
from typing import Any

import click
import structlog

from lcovreport.config.models import LcovReportConfig
from lcovreport.core.errors import CoverageParseError, ReportError
from lcovreport.coverage.models import FileCoverageRecord
from lcovreport.coverage.parser import LcovParser

logger = structlog.get_logger()


def get_config(ctx: click.Context) -> LcovReportConfig:
    config: LcovReportConfig = ctx.obj["config"]
    return config


def resolve_lcov_path(lcov_path: Path | None, config: LcovReportConfig) -> Path:
    """Command-line path if given, else the configured one."""
    return lcov_path if lcov_path is not None else Path(config.report.lcov_path)


def load_records(lcov_path: Path, *, strict: bool = False) -> list[FileCoverageRecord]:
    """Parse a tracefile for a command, failing the command when it yields nothing.

    Raises:
        click.ClickException: If the file cannot be read, fails strict
            parsing, or contains no coverage records.
    """
    try:
        records = LcovParser(strict=strict).parse(lcov_path)
    except CoverageParseError as e:
        raise click.ClickException(e.message) from e

    if not records:
        err = ReportError.no_records(str(lcov_path))
        logger.error("report.no_records", path=str(lcov_path))
        raise click.ClickException(err.message)
    return records


def pr_number_from_event(event_path: str | None) -> int | None:
    """Pull request number from a GitHub Actions event payload.

    Returns None when there is no event file or the event is not a pull
    request event.
    """
    if not event_path:
        return None
    try:
        payload: Any = json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("github_event.unreadable", path=event_path, error=str(e))
        return None
    if not isinstance(payload, dict):
        return None
    pull_request = payload.get("pull_request") or {}
    number = pull_request.get("number") if isinstance(pull_request, dict) else None
    return number if isinstance(number, int) and number > 0 else None
