"""Base reporter class with outcome accounting.

Provides the counters, check() and summarize() of ReporterProtocol.
Concrete reporters only decide how each line is emitted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sitecheck.domain.model.check_result import CheckResult
from sitecheck.domain.model.check_stats import CheckStats
from sitecheck.domain.model.enums import Outcome, RunStatus

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Verdicts:
    """Closing line for each final status.

    Attributes:
        success: No failures, no warnings
        warnings: No failures, at least one warning
        failure: At least one failure
    """

    success: str
    warnings: str
    failure: str

    def for_status(self, status: RunStatus) -> str:
        """Select the line matching status."""
        lines: Mapping[RunStatus, str] = {
            RunStatus.SUCCESS: self.success,
            RunStatus.SUCCESS_WITH_WARNINGS: self.warnings,
            RunStatus.FAILURE: self.failure,
        }
        return lines[status]


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Counters are incremented before the line is emitted and never
    decremented. Concrete reporters implement the _emit_* hooks.

    Example:
        class MyReporter(BaseReporter):
            def _emit(self, result: CheckResult) -> None:
                print(result.outcome.name, result.label)
            ...
    """

    def __init__(self) -> None:
        """Initialize zeroed counters."""
        self._passed = 0
        self._failed = 0
        self._warned = 0
        self._sections = 0

    # -------------------------------------------------------------------------
    # ReporterProtocol
    # -------------------------------------------------------------------------

    def section(self, title: str) -> None:
        """Start the next numbered check group."""
        if not title:
            raise ValueError("title must not be empty")
        self._sections += 1
        self._emit_section(self._sections, title)

    def record_pass(self, label: str) -> None:
        """Record a passed check."""
        self._passed += 1
        self._emit(CheckResult(label, Outcome.PASS))

    def record_fail(self, label: str, detail: str | None = None) -> None:
        """Record a failed check."""
        self._failed += 1
        self._emit(CheckResult(label, Outcome.FAIL, detail or None))

    def record_warn(self, label: str, detail: str | None = None) -> None:
        """Record a soft warning."""
        self._warned += 1
        self._emit(CheckResult(label, Outcome.WARN, detail or None))

    def check(self, label: str, condition: bool, detail: str | None = None) -> None:
        """Record pass if condition holds, otherwise fail with detail."""
        if condition:
            self.record_pass(label)
        else:
            self.record_fail(label, detail)

    @property
    def stats(self) -> CheckStats:
        """Snapshot of the counters."""
        return CheckStats(passed=self._passed, failed=self._failed, warned=self._warned)

    def summarize(self) -> RunStatus:
        """Classify the run from the counters."""
        return self.stats.status

    # -------------------------------------------------------------------------
    # Run framing
    # -------------------------------------------------------------------------

    def heading(self, text: str) -> None:
        """Emit the run title."""
        self._emit_heading(text)

    def render_summary(self, verdicts: Verdicts) -> RunStatus:
        """Emit the closing summary and return the final status.

        Args:
            verdicts: Closing line for each possible status

        Returns:
            Same value as summarize()
        """
        stats = self.stats
        status = stats.status
        self._emit_summary(stats, status, verdicts.for_status(status))
        return status

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    @abstractmethod
    def _emit(self, result: CheckResult) -> None:
        """Output one check result immediately."""

    @abstractmethod
    def _emit_section(self, number: int, title: str) -> None:
        """Output a numbered group heading."""

    @abstractmethod
    def _emit_heading(self, text: str) -> None:
        """Output the run title."""

    @abstractmethod
    def _emit_summary(self, stats: CheckStats, status: RunStatus, verdict: str) -> None:
        """Output the results banner and verdict line."""
