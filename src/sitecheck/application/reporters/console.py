"""Console reporter: check outcomes → rich styled lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from sitecheck.application.reporters._base import BaseReporter
from sitecheck.domain.model.enums import Outcome, RunStatus

if TYPE_CHECKING:
    from sitecheck.domain.model.check_result import CheckResult
    from sitecheck.domain.model.check_stats import CheckStats

_SYMBOLS: dict[Outcome, tuple[str, str]] = {
    Outcome.PASS: ("✓", "green"),
    Outcome.FAIL: ("✗", "red"),
    Outcome.WARN: ("⚠", "yellow"),
}

_STATUS_STYLES: dict[RunStatus, tuple[str, str]] = {
    RunStatus.SUCCESS: ("✓", "green"),
    RunStatus.SUCCESS_WITH_WARNINGS: ("⚠", "yellow"),
    RunStatus.FAILURE: ("✗", "red"),
}

_RULE_WIDTH = 50


class RichReporter(BaseReporter):
    """Console reporter: prints each outcome as it is recorded.

    Labels and details are rendered as plain Text, never as rich markup,
    so brackets in page content cannot be misread as styles.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            console: Rich console to print to. Defaults to stdout.
        """
        super().__init__()
        self._console = console or Console(highlight=False)

    def _emit(self, result: CheckResult) -> None:
        """Print '  ✓ label' and an optional '    → detail' line."""
        symbol, style = _SYMBOLS[result.outcome]
        self._console.print(Text.assemble("  ", (symbol, style), " ", result.label))
        if result.detail:
            self._console.print(Text(f"    → {result.detail}"))

    def _emit_section(self, number: int, title: str) -> None:
        """Print a bold numbered group heading after a blank line."""
        self._console.print()
        self._console.print(Text(f"{number}. {title}", style="bold"))

    def _emit_heading(self, text: str) -> None:
        """Print the run title in bold."""
        self._console.print()
        self._console.print(Text(text, style="bold"))

    def _emit_summary(self, stats: CheckStats, status: RunStatus, verdict: str) -> None:
        """Print the results banner and a colored verdict."""
        self._console.print()
        self._console.print("=" * _RULE_WIDTH)
        self._console.print(
            Text(
                f"Results: {stats.passed} passed, {stats.failed} failed, {stats.warned} warnings",
                style="bold",
            )
        )
        self._console.print("=" * _RULE_WIDTH)
        symbol, style = _STATUS_STYLES[status]
        self._console.print()
        self._console.print(Text(f"{symbol} {verdict}", style=style))
        self._console.print()
