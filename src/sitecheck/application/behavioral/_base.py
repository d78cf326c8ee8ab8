"""Base class for behavioral check groups.

Every group follows the same lifecycle: open an isolated context,
navigate, probe, assert, and close the context whatever happens.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from sitecheck.domain.model.configuration import ProberConfig
    from sitecheck.domain.model.target import Viewport
    from sitecheck.domain.ports.browser import BrowserPort, PageProbe
    from sitecheck.domain.ports.reporter import ReporterProtocol


class BehavioralCheck(ABC):
    """One numbered group of the behavioral prober.

    Concrete groups must:
    1. Set `title` class attribute
    2. Implement `run()`, recording at least one result

    A ProbeError escaping run() is recorded by the prober as a single
    failure for the group; groups that iterate (routes, viewports)
    catch it per iteration instead.
    """

    title: str
    """Section heading shown before the group's results."""

    @abstractmethod
    def run(
        self,
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        reporter: ReporterProtocol,
    ) -> None:
        """Probe the live site and record outcomes.

        Args:
            browser: Launched engine
            config: Prober profile
            base_url: Site root
            reporter: Destination for outcomes

        Raises:
            ProbeError: If navigation or evaluation fails
        """

    @staticmethod
    def open_home(
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        *,
        viewport: Viewport | None = None,
    ) -> AbstractContextManager[PageProbe]:
        """Open the home route at the default viewport once the network is idle."""
        return browser.open(
            config.home.url(base_url),
            viewport or config.default_viewport,
            wait_until="networkidle",
            timeout_ms=config.navigation_timeout_ms,
        )
