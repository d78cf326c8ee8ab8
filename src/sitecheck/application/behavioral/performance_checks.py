"""Load latency and page weight."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitecheck.application.behavioral._base import BehavioralCheck
from sitecheck.domain.model.enums import Outcome

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import ProberConfig
    from sitecheck.domain.ports.browser import BrowserPort
    from sitecheck.domain.ports.reporter import ReporterProtocol


def classify_load(load_ms: int, pass_below: int, fail_at: int) -> Outcome:
    """PASS under pass_below, FAIL at or above fail_at, WARN between."""
    if load_ms < pass_below:
        return Outcome.PASS
    if load_ms < fail_at:
        return Outcome.WARN
    return Outcome.FAIL


def classify_weight(total_kb: int, warn_at: int) -> Outcome:
    """PASS under warn_at, WARN otherwise. Weight never fails a run."""
    return Outcome.PASS if total_kb < warn_at else Outcome.WARN


class PerformanceCheck(BehavioralCheck):
    """Home route load time and total transfer size."""

    title = "Performance"

    def run(
        self,
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        reporter: ReporterProtocol,
    ) -> None:
        with browser.open(
            config.home.url(base_url),
            config.default_viewport,
            wait_until="load",
            timeout_ms=config.performance_timeout_ms,
        ) as page:
            load_ms = round(page.load_ms)
            weight = page.resource_weight()

        label = f"Page load: {load_ms}ms"
        match classify_load(load_ms, config.load_pass_ms, config.load_fail_ms):
            case Outcome.PASS:
                reporter.record_pass(label)
            case Outcome.WARN:
                reporter.record_warn(label, "Consider optimizing")
            case Outcome.FAIL:
                reporter.record_fail(label, "Too slow")

        label = f"Total resources: {weight.count} files, {weight.total_kb}KB"
        if classify_weight(weight.total_kb, config.weight_warn_kb) is Outcome.PASS:
            reporter.record_pass(label)
        else:
            reporter.record_warn(label, "Page is heavy")
