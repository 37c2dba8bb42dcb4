"""LCOV parsing and text reporting.

Usage:
    from lcovreport.coverage import parse_lcov, summarize, render_table

    records = parse_lcov(Path("coverage/lcov.info").read_text())
    print(summarize(records))
    print(render_table(records))
"""

from lcovreport.core.errors import CoverageParseError
from lcovreport.coverage.models import (
    BranchCoverage,
    CoverageCount,
    FileCoverageRecord,
    FunctionCoverage,
    LineCoverage,
)
from lcovreport.coverage.parser import LcovParser, parse_lcov, parse_lcov_strict
from lcovreport.coverage.report import (
    build_comment_body,
    pct,
    render_pretty,
    render_table,
    summarize,
)

__all__ = [
    # Models
    "BranchCoverage",
    "CoverageCount",
    "CoverageParseError",
    "FileCoverageRecord",
    "FunctionCoverage",
    "LineCoverage",
    # Parser
    "LcovParser",
    "parse_lcov",
    "parse_lcov_strict",
    # Report
    "build_comment_body",
    "pct",
    "render_pretty",
    "render_table",
    "summarize",
]
