"""Browser probing exceptions."""

from sitecheck.domain.exceptions.base import SiteCheckError
from sitecheck.domain.exceptions.extraction import ExtractionError


class ProbeError(ExtractionError):
    """Runtime fact could not be extracted from a live page.

    Covers navigation timeouts and failed in-page evaluation.

    Attributes:
        action: What the prober was doing
        reason: Underlying engine error message
    """


class BrowserLaunchError(SiteCheckError):
    """Browser engine could not be started.

    Fatal: no check group can run without a browser.

    Attributes:
        reason: Why launch failed
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Browser failed to launch: {reason}")
