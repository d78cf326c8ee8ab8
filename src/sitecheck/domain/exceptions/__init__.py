"""Domain exceptions."""

from sitecheck.domain.exceptions.base import SiteCheckError
from sitecheck.domain.exceptions.config import ConfigError
from sitecheck.domain.exceptions.document import DocumentReadError
from sitecheck.domain.exceptions.extraction import ExtractionError
from sitecheck.domain.exceptions.probe import BrowserLaunchError, ProbeError

__all__ = [
    "SiteCheckError",
    "DocumentReadError",
    "ConfigError",
    "ExtractionError",
    "ProbeError",
    "BrowserLaunchError",
]
