"""Reporter protocol for check outcomes.

Check groups depend on this Protocol only. Output format and destination
belong to the implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sitecheck.domain.model.check_stats import CheckStats
    from sitecheck.domain.model.enums import RunStatus


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Counters only ever grow. Every record call emits immediately, in call
    order, because the output doubles as the audit trail of what ran.

    Example:
        class CountingReporter:
            def record_pass(self, label: str) -> None:
                self.passed += 1
            ...
    """

    def section(self, title: str) -> None:
        """Start a new check group heading. Counters unchanged."""
        ...

    def record_pass(self, label: str) -> None:
        """Record a passed check."""
        ...

    def record_fail(self, label: str, detail: str | None = None) -> None:
        """Record a failed check. Never raises."""
        ...

    def record_warn(self, label: str, detail: str | None = None) -> None:
        """Record a soft warning. Never affects pass/fail classification."""
        ...

    def check(self, label: str, condition: bool, detail: str | None = None) -> None:
        """Record pass if condition holds, otherwise fail with detail."""
        ...

    @property
    def stats(self) -> CheckStats:
        """Snapshot of the counters."""
        ...

    def summarize(self) -> RunStatus:
        """Classify the run from the counters."""
        ...
