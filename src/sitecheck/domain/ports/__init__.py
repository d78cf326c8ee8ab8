"""Domain ports: Protocols implemented by application and infrastructure."""

from sitecheck.domain.ports.browser import BrowserPort, PageProbe
from sitecheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "BrowserPort",
    "PageProbe",
    "ReporterProtocol",
]
