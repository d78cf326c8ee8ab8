"""Domain enumerations."""

from enum import Enum, auto


class Outcome(Enum):
    """Outcome of a single check."""

    PASS = auto()
    FAIL = auto()  # run fails
    WARN = auto()  # surfaced, never fails the run


class RunStatus(Enum):
    """Final classification of a whole run."""

    SUCCESS = auto()
    SUCCESS_WITH_WARNINGS = auto()
    FAILURE = auto()

    @property
    def exit_code(self) -> int:
        """Process exit code for this status."""
        return 1 if self is RunStatus.FAILURE else 0
