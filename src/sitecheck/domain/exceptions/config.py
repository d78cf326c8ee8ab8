"""Configuration exceptions."""

from sitecheck.domain.exceptions.base import SiteCheckError


class ConfigError(SiteCheckError):
    """Invalid check profile.

    Raised when a profile file cannot be parsed or contains unknown keys
    or values of the wrong type.

    Attributes:
        source: Profile file or key path that is invalid (must not be empty)
        reason: Why it is invalid (must not be empty)
    """

    def __init__(self, source: str, reason: str) -> None:
        if not source:
            raise ValueError("source must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.reason = reason
        super().__init__(f"Invalid config '{source}': {reason}")
