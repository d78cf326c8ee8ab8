"""Behavioral prober: runs the live-page check groups against one site."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sitecheck.application.behavioral._registry import default_checks
from sitecheck.application.reporters._base import Verdicts
from sitecheck.domain.exceptions.probe import ProbeError

if TYPE_CHECKING:
    from sitecheck.application.behavioral._base import BehavioralCheck
    from sitecheck.application.reporters._base import BaseReporter
    from sitecheck.domain.model.configuration import ProberConfig
    from sitecheck.domain.model.enums import RunStatus
    from sitecheck.domain.ports.browser import BrowserPort

logger = logging.getLogger(__name__)

PROBER_VERDICTS = Verdicts(
    success="ALL BROWSER CHECKS PASSED",
    warnings="PASSED WITH WARNINGS",
    failure="BROWSER QA FAILED",
)


class BehavioralProber:
    """Drives a real browser through the site's runtime behavior.

    Groups share one launched browser but each opens its own context,
    so no state leaks between groups. A ProbeError escaping a group is
    recorded as one failure and the next group still runs.

    Example:
        with PlaywrightBrowser.launch() as browser:
            status = BehavioralProber(ProberConfig(), RichReporter()).run(browser, url)
    """

    def __init__(
        self,
        config: ProberConfig,
        reporter: BaseReporter,
        checks: tuple[BehavioralCheck, ...] | None = None,
    ) -> None:
        """Initialize prober.

        Args:
            config: Prober profile
            reporter: Destination for outcomes
            checks: Groups to run (default: every registered group)
        """
        self._config = config
        self._reporter = reporter
        self._checks = default_checks() if checks is None else checks

    def run(self, browser: BrowserPort, base_url: str) -> RunStatus:
        """Run every group and render the summary.

        Args:
            browser: Launched engine shared by all groups
            base_url: Site root

        Returns:
            Final run status
        """
        self._reporter.heading(f"Browser QA - {base_url}")
        for check in self._checks:
            self._reporter.section(check.title)
            try:
                check.run(browser, self._config, base_url, self._reporter)
            except ProbeError as e:
                logger.warning("%s: %s", check.title, e)
                self._reporter.record_fail(f"{check.title} could not be checked", str(e))
        return self._reporter.render_summary(PROBER_VERDICTS)
