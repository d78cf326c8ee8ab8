"""Fact extraction exceptions."""

from sitecheck.domain.exceptions.base import SiteCheckError


class ExtractionError(SiteCheckError):
    """A fact could not be derived from the target.

    Not fatal: the check group that raised it records a failure and
    the run continues with the next group.

    Attributes:
        action: What was being extracted (must not be empty)
        reason: Underlying error message (must not be empty)
    """

    def __init__(self, action: str, reason: str) -> None:
        if not action:
            raise ValueError("action must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.action = action
        self.reason = reason
        super().__init__(f"{action} failed: {reason}")
