"""Single labeled check outcome."""

from dataclasses import dataclass

from sitecheck.domain.model.enums import Outcome


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of one check, consumed immediately by a reporter.

    Attributes:
        label: What was checked
        outcome: PASS/FAIL/WARN
        detail: Optional explanation shown under the label
    """

    label: str
    outcome: Outcome
    detail: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.label:
            raise ValueError("label must not be empty")
        if self.outcome is None:
            raise TypeError("outcome must not be None")
