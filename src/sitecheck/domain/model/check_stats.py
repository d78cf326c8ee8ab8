"""Counter snapshot for a check run."""

from __future__ import annotations

from dataclasses import dataclass

from sitecheck.domain.model.enums import RunStatus


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Pass/fail/warn counts at a point in time.

    Immutable value object. The status is a pure function of the
    three counters and does not depend on the order checks ran in.

    Attributes:
        passed: Number of passed checks
        failed: Number of failed checks
        warned: Number of warnings
    """

    passed: int
    failed: int
    warned: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.passed < 0:
            raise ValueError(f"passed must be >= 0, got {self.passed}")
        if self.failed < 0:
            raise ValueError(f"failed must be >= 0, got {self.failed}")
        if self.warned < 0:
            raise ValueError(f"warned must be >= 0, got {self.warned}")

    @property
    def status(self) -> RunStatus:
        """Classify the run."""
        if self.failed > 0:
            return RunStatus.FAILURE
        if self.warned > 0:
            return RunStatus.SUCCESS_WITH_WARNINGS
        return RunStatus.SUCCESS

    @property
    def total(self) -> int:
        """Number of recorded outcomes."""
        return self.passed + self.failed + self.warned

    @classmethod
    def empty(cls) -> CheckStats:
        """Create zeroed stats."""
        return cls(passed=0, failed=0, warned=0)
