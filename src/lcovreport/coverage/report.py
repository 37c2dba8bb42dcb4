"""Text report generation.

Turns parsed records into the two strings published for a pull request:
a three-line total summary and a pipe-delimited markdown table with one
row per file. ``build_comment_body`` wraps both in the comment template.

Only the summary counts (LF/LH, FNF/FNH, BRF/BRH) are used here; the
per-line execution counts are not recounted.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from lcovreport.config.models import DEFAULT_MARKER
from lcovreport.coverage.models import CoverageCount, FileCoverageRecord

TABLE_HEADERS = (
    "Filename",
    "Lines",
    "Line Coverage",
    "Functions",
    "Function Coverage",
    "Branches",
    "Branch Coverage",
)

SUMMARY_LABELS = ("Lines", "Functions", "Branches")


def _to_precision(value: Decimal, digits: int) -> str:
    """Round half-up to significant digits, fixed notation for exponents -6..digits-1."""
    if value.is_zero():
        return "0." + "0" * (digits - 1)
    exponent = value.adjusted()
    rounded = value.quantize(Decimal(1).scaleb(exponent - digits + 1), rounding=ROUND_HALF_UP)
    if rounded.adjusted() != exponent:
        # 9.9996 -> 10.00 carries into the next power of ten
        exponent += 1
        rounded = value.quantize(Decimal(1).scaleb(exponent - digits + 1), rounding=ROUND_HALF_UP)
    if -6 <= exponent < digits:
        return format(rounded, "f")
    mantissa = format(rounded.scaleb(-exponent), "f")
    return f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def pct(hit: int, found: int) -> str:
    """Format hit/found as a percentage with 4 significant digits.

    Nothing to cover reads as fully covered. Ties round up, and very small
    or very large values switch to exponent notation (``5.000e-7%``).

    >>> pct(5, 10)
    '50.00%'
    >>> pct(81, 800)
    '10.13%'
    >>> pct(0, 0)
    '100.0%'
    """
    if found == 0:
        return "100.0%"
    return _to_precision(Decimal(100 * hit / found), 4) + "%"


def _ratio(count: CoverageCount) -> str:
    return f"{count.hit}/{count.found}"


def render_pretty(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a pipe-delimited table with left-aligned, padded cells.

    Returns an empty string if any row does not have one cell per header.
    """
    widths = [len(h) for h in headers]
    for row in rows:
        if len(row) != len(headers):
            return ""
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    lines = [
        line(headers),
        "|" + "|".join("-" * (w + 2) for w in widths) + "|",
    ]
    lines.extend(line(row) for row in rows)
    return "\n".join(lines)


def render_table(records: Sequence[FileCoverageRecord]) -> str:
    """Per-file coverage table, one row per record in tracefile order."""
    rows = []
    for r in records:
        row = [r.filename]
        for count in r.counts():
            row.append(_ratio(count))
            row.append(pct(count.hit, count.found))
        rows.append(row)
    return render_pretty(TABLE_HEADERS, rows)


def summarize(records: Sequence[FileCoverageRecord]) -> str:
    """Total hit/found per category across all records.

    Returns three lines: Lines, Functions, Branches.
    """
    totals = [CoverageCount(), CoverageCount(), CoverageCount()]
    for record in records:
        for total, count in zip(totals, record.counts()):
            total.hit += count.hit
            total.found += count.found

    return "\n".join(
        f"{label}: {_ratio(total)} {pct(total.hit, total.found)}"
        for label, total in zip(SUMMARY_LABELS, totals)
    )


def build_comment_body(
    records: Sequence[FileCoverageRecord],
    *,
    title: str = "Code Coverage",
    marker: str = DEFAULT_MARKER,
) -> str:
    """Markdown comment: summary up front, the table folded into a details block.

    The marker goes last so a later run can find and replace this comment.
    """
    return f"""
### {title}

{summarize(records)}

<details>
<summary>Details</summary>

{render_table(records)}

</details>
{marker}
"""
