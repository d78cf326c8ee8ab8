"""Base exceptions for sitecheck domain."""


class SiteCheckError(Exception):
    """Root exception for all sitecheck errors.

    All domain exceptions inherit from this.
    Allows catching all sitecheck-specific errors.
    """
