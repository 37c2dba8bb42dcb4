"""LCOV tracefile parser.

LCOV format is a plain text format with records like:
- TN:<test name>
- SF:<source file path>
- DA:<line>,<hit count>[,<checksum>]
- FNDA:<hit count>,<name>
- BRDA:<line>,<block>,<branch>,<taken>
- LF:<lines found>
- LH:<lines hit>
- FNF:<functions found>
- FNH:<functions hit>
- BRF:<branches found>
- BRH:<branches hit>
- end_of_record

Counts seen under the same test for the same unit are summed, so a
tracefile that concatenates several test runs parses into one record per
SF block with per-test totals.

The default parser is permissive: a directive it cannot use is dropped and
the scan carries on. ``parse_lcov_strict`` runs the same scan but raises on
the first directive the permissive parser would have dropped.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from lcovreport.core.errors import CoverageParseError
from lcovreport.coverage.models import FileCoverageRecord

logger = structlog.get_logger()

# tag → (record attribute, count field)
_SUMMARY_TAGS: dict[str, tuple[str, str]] = {
    "LF": ("lines", "found"),
    "LH": ("lines", "hit"),
    "FNF": ("functions", "found"),
    "FNH": ("functions", "hit"),
    "BRF": ("branches", "found"),
    "BRH": ("branches", "hit"),
}

_RECORD_TAGS = frozenset({"DA", "FNDA", "BRDA", *_SUMMARY_TAGS})

END_OF_RECORD = "end_of_record"


def _to_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _non_negative(*values: int | None) -> bool:
    return all(v is not None and v >= 0 for v in values)


def _apply(record: FileCoverageRecord, tag: str, value: str, test: str) -> str | None:
    """Apply one data or summary directive to the open record.

    Returns None when the directive was applied, otherwise the reason it
    was dropped.
    """
    if tag == "DA":
        parts = value.split(",")
        if len(parts) < 2:
            return "expected DA:<line>,<count>"
        line_num, hits = _to_int(parts[0]), _to_int(parts[1])
        if not _non_negative(line_num, hits):
            return "line and count must be non-negative integers"
        record.lines.add(line_num, test, hits)  # type: ignore[arg-type]
        return None

    if tag == "FNDA":
        # Names may contain commas (C++ templates, JS anonymous functions)
        parts = value.split(",", 1)
        if len(parts) < 2:
            return "expected FNDA:<count>,<name>"
        hits = _to_int(parts[0])
        if not _non_negative(hits):
            return "count must be a non-negative integer"
        record.functions.add(parts[1], test, hits)  # type: ignore[arg-type]
        return None

    if tag == "BRDA":
        parts = value.split(",")
        if len(parts) < 4:
            return "expected BRDA:<line>,<block>,<branch>,<taken>"
        line_num, block, branch, taken = (_to_int(p) for p in parts[:4])
        # Block number is validated but does not take part in branch identity
        if not _non_negative(line_num, block, branch, taken):
            return "line, block, branch and taken must be non-negative integers"
        record.branches.add(line_num, test, branch, taken)  # type: ignore[arg-type]
        return None

    attr, count_field = _SUMMARY_TAGS[tag]
    n = _to_int(value)
    if not _non_negative(n):
        return f"{tag} must be a non-negative integer"
    setattr(getattr(record, attr), count_field, n)
    return None


def _scan(text: str, *, strict: bool) -> list[FileCoverageRecord]:
    records: list[FileCoverageRecord] = []
    current: FileCoverageRecord | None = None
    opened_at = 0
    test = ""

    def reject(line_no: int, line: str, reason: str) -> None:
        if strict:
            raise CoverageParseError.invalid_line(line_no, line, reason)

    line_no = 0
    for line_no, raw in enumerate(text.removeprefix("\ufeff").split("\n"), start=1):
        line = raw.strip()
        if line == END_OF_RECORD:
            if current is not None:
                records.append(current)
            current = None
            continue

        tag, sep, value = line.partition(":")
        if not sep:
            continue

        if tag == "TN":
            test = value
        elif tag == "SF":
            if current is not None:
                reject(line_no, line, f"record opened at line {opened_at} was never closed")
            current = FileCoverageRecord(filename=value)
            opened_at = line_no
        elif tag in _RECORD_TAGS:
            if current is None:
                reject(line_no, line, "directive outside of a SF record")
                continue
            reason = _apply(current, tag, value, test)
            if reason is not None:
                reject(line_no, line, reason)

    if current is not None:
        reject(
            line_no,
            f"SF:{current.filename}",
            f"record opened at line {opened_at} was never closed",
        )

    return records


def parse_lcov(text: str) -> list[FileCoverageRecord]:
    """Parse tracefile text into per-file records, in file order.

    Never raises for malformed content: unusable directives are skipped,
    and a record without a closing end_of_record is dropped. A leading
    byte order mark is ignored.
    """
    return _scan(text, strict=False)


def parse_lcov_strict(text: str) -> list[FileCoverageRecord]:
    """Parse like parse_lcov, but reject input parse_lcov would silently repair.

    Raises:
        CoverageParseError: On the first negative or non-numeric field,
            directive with too few fields, data directive outside a record,
            or record left unterminated.
    """
    return _scan(text, strict=True)


class LcovParser:
    """Parser for LCOV format coverage files."""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    @property
    def format_id(self) -> str:
        return "lcov"

    def can_parse(self, path: Path) -> bool:
        """Check if file looks like LCOV format."""
        if not path.is_file():
            return False
        if path.suffix in (".info", ".lcov"):
            return True
        # Content sniff: first meaningful line should open a test or a record
        try:
            with path.open(encoding="utf-8-sig") as f:
                for line in f:
                    stripped = line.strip()
                    if stripped.startswith(("SF:", "TN:")):
                        return True
                    if stripped and not stripped.startswith("#"):
                        break
        except (OSError, UnicodeDecodeError):
            pass
        return False

    def parse_text(self, text: str) -> list[FileCoverageRecord]:
        if self.strict:
            return parse_lcov_strict(text)
        return parse_lcov(text)

    def parse(self, path: Path) -> list[FileCoverageRecord]:
        """Read and parse a tracefile.

        Raises:
            CoverageParseError: If the file cannot be read, or strict
                validation fails.
        """
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CoverageParseError.unreadable(str(path), str(e)) from e

        records = self.parse_text(content)
        logger.debug("lcov.parsed", path=str(path), records=len(records), strict=self.strict)
        return records
