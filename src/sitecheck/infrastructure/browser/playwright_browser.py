"""Playwright implementation of the browser ports.

One headless Chromium per run; every open() gets a fresh context that
is closed on exit, even when navigation or a probe fails.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from sitecheck.domain.exceptions.probe import BrowserLaunchError, ProbeError
from sitecheck.domain.model.runtime_facts import (
    AnimationState,
    LanguageState,
    LayoutMetrics,
    MockVisibility,
    ResourceWeight,
)
from sitecheck.infrastructure.browser import scripts

if TYPE_CHECKING:
    from collections.abc import Iterator

    from playwright.sync_api import Browser, Page

    from sitecheck.domain.model.configuration import PageSelectors, ProberConfig
    from sitecheck.domain.model.page_contract import PageContract
    from sitecheck.domain.model.target import Viewport
    from sitecheck.domain.ports.browser import WaitUntil

logger = logging.getLogger(__name__)


def _reason(error: PlaywrightError) -> str:
    return error.message or type(error).__name__


class PlaywrightPage:
    """PageProbe over a single Playwright page.

    Uncaught page errors are collected from the moment the page is
    created, before navigation starts.
    """

    def __init__(self, page: Page, selectors: PageSelectors, contract: PageContract) -> None:
        self._page = page
        self._selectors = selectors
        self._contract = contract
        self._errors: list[str] = []
        self._status: int | None = None
        self._load_ms = 0.0
        page.on("pageerror", lambda error: self._errors.append(error.message))

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self, url: str, *, wait_until: WaitUntil, timeout_ms: int) -> None:
        """Load url and record status and wall-clock duration.

        Raises:
            ProbeError: If navigation fails or times out
        """
        started = time.perf_counter()
        try:
            response = self._page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except PlaywrightError as e:
            raise ProbeError(f"navigate to {url}", _reason(e)) from e
        self._load_ms = (time.perf_counter() - started) * 1000
        self._status = response.status if response is not None else None
        logger.debug("%s -> HTTP %s in %.0fms", url, self._status, self._load_ms)

    @property
    def status(self) -> int | None:
        return self._status

    @property
    def load_ms(self) -> float:
        return self._load_ms

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    # -------------------------------------------------------------------------
    # Probes
    # -------------------------------------------------------------------------

    def _evaluate(self, action: str, script: str, arg: Any = None) -> Any:
        try:
            return self._page.evaluate(script, arg)
        except PlaywrightError as e:
            raise ProbeError(action, _reason(e)) from e

    def wait(self, ms: int) -> None:
        try:
            self._page.wait_for_timeout(ms)
        except PlaywrightError as e:
            raise ProbeError(f"wait {ms}ms", _reason(e)) from e

    def layout(self) -> LayoutMetrics:
        sel = self._selectors
        raw = self._evaluate(
            "measure layout",
            scripts.LAYOUT,
            {"nav": sel.nav, "mock": sel.mock, "mockContainer": sel.mock_container, "footer": sel.footer},
        )
        mock = raw["mock"]
        return LayoutMetrics(
            scroll_width=int(raw["scrollWidth"]),
            inner_width=int(raw["innerWidth"]),
            nav_height=raw["navHeight"],
            mock=MockVisibility(
                found=bool(mock["found"]),
                display=str(mock["display"]),
                width=float(mock["width"]),
                height=float(mock["height"]),
            ),
            footer_height=raw["footerHeight"],
        )

    def scroll_through(self, step_px: int, pause_ms: int) -> None:
        self._evaluate("scroll through page", scripts.SCROLL_THROUGH, [step_px, pause_ms])

    def broken_images(self) -> tuple[str, ...]:
        return tuple(self._evaluate("inspect images", scripts.BROKEN_IMAGES))

    def document_lang(self) -> str:
        return str(self._evaluate("read document language", scripts.DOCUMENT_LANG))

    def switch_language(self, code: str, settle_ms: int) -> LanguageState:
        fn = self._contract.switch_language
        self._evaluate(f"{fn}({code!r})", scripts.switch_language(self._contract), code)
        self.wait(settle_ms)
        raw = self._evaluate("read language state", scripts.HEADING_STATE, self._selectors.heading)
        return LanguageState(lang=str(raw["lang"]), heading=raw["heading"])

    def toggle_languages(self, first: str, second: str, cycles: int, pause_ms: int) -> tuple[str, ...]:
        seen = len(self._errors)
        thrown = self._evaluate(
            "toggle languages",
            scripts.toggle_languages(self._contract),
            [first, second, cycles, pause_ms],
        )
        return tuple(thrown) + tuple(self._errors[seen:])

    def animation_state(self) -> AnimationState:
        raw = self._evaluate(
            "read animation state",
            scripts.animation_state(self._contract),
            self._contract.message_container_id,
        )
        return AnimationState(
            message_count=int(raw["messageCount"]),
            timeout_set=bool(raw["timeoutSet"]),
            tracking_present=bool(raw["trackingPresent"]),
        )

    def restart_animation(self, settle_ms: int) -> int:
        return int(
            self._evaluate(
                f"{self._contract.restart_animation}()",
                scripts.restart_animation(self._contract),
                [self._contract.message_container_id, settle_ms],
            )
        )

    def open_first_accordion(self, settle_ms: int) -> bool:
        sel = self._selectors
        return bool(
            self._evaluate(
                "open accordion",
                scripts.ACCORDION,
                [sel.accordion_button, sel.accordion_item, sel.accordion_answer, settle_ms],
            )
        )

    def click_tab(self, index: int, settle_ms: int) -> bool:
        return bool(self._evaluate("click tab", scripts.CLICK_TAB, [self._selectors.tab, index, settle_ms]))

    def fill_input(self, selector: str, value: str) -> str | None:
        retained = self._evaluate(f"fill {selector}", scripts.FILL_INPUT, [selector, value])
        return None if retained is None else str(retained)

    def jump_to_anchor(self, target_id: str, settle_ms: int) -> float | None:
        top = self._evaluate(f"jump to #{target_id}", scripts.JUMP_TO_ANCHOR, [target_id, settle_ms])
        return None if top is None else float(top)

    def resource_weight(self) -> ResourceWeight:
        raw = self._evaluate("measure resources", scripts.RESOURCE_WEIGHT)
        return ResourceWeight(count=int(raw["count"]), total_kb=int(raw["totalKb"]))


class PlaywrightBrowser:
    """BrowserPort over a launched Chromium instance.

    Example:
        with PlaywrightBrowser.launch(config) as browser:
            with browser.open(url, viewport, wait_until="load", timeout_ms=30000) as page:
                print(page.status)
    """

    def __init__(self, browser: Browser, selectors: PageSelectors, contract: PageContract) -> None:
        self._browser = browser
        self._selectors = selectors
        self._contract = contract

    @classmethod
    @contextmanager
    def launch(cls, config: ProberConfig, *, headless: bool = True) -> Iterator[PlaywrightBrowser]:
        """Start Chromium for the duration of the block.

        Args:
            config: Prober profile (selectors and page contract)
            headless: Run without a visible window

        Raises:
            BrowserLaunchError: If the engine cannot be started
        """
        with sync_playwright() as playwright:
            try:
                browser = playwright.chromium.launch(headless=headless)
            except PlaywrightError as e:
                raise BrowserLaunchError(_reason(e)) from e
            logger.debug("chromium %s launched (headless=%s)", browser.version, headless)
            try:
                yield cls(browser, config.selectors, config.contract)
            finally:
                browser.close()
                logger.debug("chromium closed")

    @contextmanager
    def open(
        self,
        url: str,
        viewport: Viewport,
        *,
        wait_until: WaitUntil,
        timeout_ms: int,
    ) -> Iterator[PlaywrightPage]:
        """Fresh context at viewport, navigated to url.

        Raises:
            ProbeError: If the context cannot be created or navigation fails
        """
        try:
            context = self._browser.new_context(viewport={"width": viewport.width, "height": viewport.height})
        except PlaywrightError as e:
            raise ProbeError("open browser context", _reason(e)) from e
        logger.debug("context opened: %s at %s", url, viewport)
        try:
            try:
                page = context.new_page()
            except PlaywrightError as e:
                raise ProbeError("open page", _reason(e)) from e
            probe = PlaywrightPage(page, self._selectors, self._contract)
            probe.navigate(url, wait_until=wait_until, timeout_ms=timeout_ms)
            yield probe
        finally:
            context.close()
            logger.debug("context closed: %s", url)
