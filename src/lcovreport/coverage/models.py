"""Per-file coverage records built from an lcov tracefile.

Each record carries the summary counts reported by the tracefile
(LF/LH, FNF/FNH, BRF/BRH) next to the raw execution counts, which are
keyed by unit and then by test name so that tracefiles merged from
several test runs keep their per-test detail.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class CoverageCount:
    """Found/hit pair for one kind of measurable unit."""

    found: int = 0
    hit: int = 0

    @property
    def rate(self) -> float:
        """Fraction of units hit. An empty denominator counts as fully covered."""
        if self.found == 0:
            return 1.0
        return self.hit / self.found


@dataclass(slots=True)
class LineCoverage(CoverageCount):
    # line number → test name → execution count
    count: dict[int, dict[str, int]] = field(default_factory=dict)

    def add(self, line: int, test: str, hits: int) -> None:
        per_test = self.count.setdefault(line, {})
        per_test[test] = per_test.get(test, 0) + hits


@dataclass(slots=True)
class FunctionCoverage(CoverageCount):
    # function name → test name → call count
    count: dict[str, dict[str, int]] = field(default_factory=dict)

    def add(self, name: str, test: str, hits: int) -> None:
        per_test = self.count.setdefault(name, {})
        per_test[test] = per_test.get(test, 0) + hits


@dataclass(slots=True)
class BranchCoverage(CoverageCount):
    # line number → test name → branch number → taken count
    count: dict[int, dict[str, dict[int, int]]] = field(default_factory=dict)

    def add(self, line: int, test: str, branch: int, taken: int) -> None:
        per_branch = self.count.setdefault(line, {}).setdefault(test, {})
        per_branch[branch] = per_branch.get(branch, 0) + taken


@dataclass(slots=True)
class FileCoverageRecord:
    """Coverage data for one SF: ... end_of_record block.

    The filename is kept exactly as the tracefile reports it.
    """

    filename: str
    lines: LineCoverage = field(default_factory=LineCoverage)
    functions: FunctionCoverage = field(default_factory=FunctionCoverage)
    branches: BranchCoverage = field(default_factory=BranchCoverage)

    def counts(self) -> tuple[CoverageCount, CoverageCount, CoverageCount]:
        """Lines, functions and branches, in report order."""
        return self.lines, self.functions, self.branches
