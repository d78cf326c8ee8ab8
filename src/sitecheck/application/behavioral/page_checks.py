"""Check groups over page delivery: load status, layout and images."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sitecheck.application.behavioral._base import BehavioralCheck
from sitecheck.domain.exceptions.probe import ProbeError

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import ProberConfig
    from sitecheck.domain.model.runtime_facts import LayoutMetrics
    from sitecheck.domain.model.target import Viewport
    from sitecheck.domain.ports.browser import BrowserPort
    from sitecheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class PageLoadCheck(BehavioralCheck):
    """Every route answers 200 without uncaught page errors."""

    title = "Page Load"

    def run(
        self,
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        reporter: ReporterProtocol,
    ) -> None:
        for route in config.routes:
            try:
                with browser.open(
                    route.url(base_url),
                    config.default_viewport,
                    wait_until="networkidle",
                    timeout_ms=config.navigation_timeout_ms,
                ) as page:
                    status = page.status
                    errors = page.errors
            except ProbeError as e:
                logger.info("%s: %s", route.name, e)
                reporter.record_fail(f"{route.name} load", e.reason)
                continue

            if status == 200:
                reporter.record_pass(f"{route.name} loads (HTTP {status})")
            else:
                reporter.record_fail(f"{route.name} load", f"HTTP {status}")

            if not errors:
                reporter.record_pass(f"{route.name} - no JS errors")
            for error in errors:
                reporter.record_fail(f"{route.name} JS error", error)


class ResponsiveLayoutCheck(BehavioralCheck):
    """No overflow and key landmarks rendered at every viewport."""

    title = "Responsive Layout"

    def run(
        self,
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        reporter: ReporterProtocol,
    ) -> None:
        for viewport in config.viewports:
            try:
                with self.open_home(browser, config, base_url, viewport=viewport) as page:
                    metrics = page.layout()
            except ProbeError as e:
                logger.info("%s: %s", viewport, e)
                reporter.record_fail(f"{viewport} - layout could not be measured", e.reason)
                continue
            _report_layout(viewport, metrics, reporter)


def _report_layout(viewport: Viewport, metrics: LayoutMetrics, reporter: ReporterProtocol) -> None:
    name = viewport.name

    if metrics.overflows:
        reporter.record_fail(
            f"{viewport} - horizontal overflow",
            f"body={metrics.scroll_width}px > viewport={metrics.inner_width}px",
        )
    else:
        reporter.record_pass(f"{viewport} - no horizontal overflow")

    if metrics.nav_height:
        reporter.record_pass(f"{name} - nav visible")
    else:
        reporter.record_fail(f"{name} - nav not visible")

    mock = metrics.mock
    if mock.visible:
        reporter.record_pass(f"{name} - phone mockup visible ({round(mock.width)}x{round(mock.height)})")
    else:
        reporter.record_fail(f"{name} - phone mockup hidden or collapsed")

    if metrics.footer_height:
        reporter.record_pass(f"{name} - footer accessible")
    else:
        reporter.record_fail(f"{name} - footer not accessible")


class LazyImagesCheck(BehavioralCheck):
    """Every image is loaded once the page has been scrolled through."""

    title = "Images"

    def run(
        self,
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        reporter: ReporterProtocol,
    ) -> None:
        with self.open_home(browser, config, base_url) as page:
            page.scroll_through(config.scroll_step_px, config.scroll_pause_ms)
            page.wait(config.lazy_settle_ms)
            broken = page.broken_images()

        if not broken:
            reporter.record_pass("All images loaded after full scroll")
        for src in broken:
            reporter.record_fail(f"Broken image: {src}")
