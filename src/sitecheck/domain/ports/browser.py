"""Browser ports: the prober's view of a rendering engine.

The behavioral check groups talk to these Protocols only. The Playwright
adapter implements them; tests substitute in-memory fakes.

Every PageProbe method may raise ProbeError when the underlying engine
fails (timeout, evaluation error). Check groups convert it into a failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Protocol

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from sitecheck.domain.model.runtime_facts import (
        AnimationState,
        LanguageState,
        LayoutMetrics,
        ResourceWeight,
    )
    from sitecheck.domain.model.target import Viewport

# Navigation milestone a page open waits for
type WaitUntil = Literal["commit", "domcontentloaded", "load", "networkidle"]


class PageProbe(Protocol):
    """One navigated page inside an isolated browsing context."""

    @property
    def status(self) -> int | None:
        """HTTP status of the navigation response (None if no response)."""
        ...

    @property
    def load_ms(self) -> float:
        """Wall-clock duration of the navigation."""
        ...

    @property
    def errors(self) -> tuple[str, ...]:
        """Uncaught page errors raised so far, in order."""
        ...

    def wait(self, ms: int) -> None:
        """Let the page run for a fixed delay."""
        ...

    def layout(self) -> LayoutMetrics:
        """Measure overflow, navigation, mockup and footer."""
        ...

    def scroll_through(self, step_px: int, pause_ms: int) -> None:
        """Scroll the full document height, then back to the top."""
        ...

    def broken_images(self) -> tuple[str, ...]:
        """Sources of non-inline images not fully loaded."""
        ...

    def document_lang(self) -> str:
        """Current document language attribute."""
        ...

    def switch_language(self, code: str, settle_ms: int) -> LanguageState:
        """Invoke the page's language switch and read back its state."""
        ...

    def toggle_languages(self, first: str, second: str, cycles: int, pause_ms: int) -> tuple[str, ...]:
        """Alternate languages rapidly; return errors raised meanwhile."""
        ...

    def animation_state(self) -> AnimationState:
        """Read chat animation globals and rendered messages."""
        ...

    def restart_animation(self, settle_ms: int) -> int:
        """Restart the chat animation; return rendered message count."""
        ...

    def open_first_accordion(self, settle_ms: int) -> bool:
        """Click the first accordion toggle; True if its panel opened."""
        ...

    def click_tab(self, index: int, settle_ms: int) -> bool:
        """Click a tab control; False if it does not exist."""
        ...

    def fill_input(self, selector: str, value: str) -> str | None:
        """Set an input's value; return what it retained (None if absent)."""
        ...

    def jump_to_anchor(self, target_id: str, settle_ms: int) -> float | None:
        """Click the link to #target_id; return target's top offset."""
        ...

    def resource_weight(self) -> ResourceWeight:
        """Aggregate transfer size of all network entries."""
        ...


class BrowserPort(Protocol):
    """Launched engine able to open isolated browsing contexts."""

    def open(
        self,
        url: str,
        viewport: Viewport,
        *,
        wait_until: WaitUntil,
        timeout_ms: int,
    ) -> AbstractContextManager[PageProbe]:
        """Open a fresh context, navigate and yield the page.

        The context is closed when the block exits, including on error.

        Raises:
            ProbeError: If navigation fails or times out
        """
        ...
