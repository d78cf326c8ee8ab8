"""Test factories for creating domain objects and test doubles.

Centralized helpers to avoid duplication across test modules:
- RecordingReporter keeps every outcome in memory
- FakeBrowser / FakePage stand in for the Playwright adapter
- fixture site helpers copy and patch the reference landing page
"""

from __future__ import annotations

import shutil
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from sitecheck.application.reporters._base import BaseReporter
from sitecheck.domain.exceptions.probe import ProbeError
from sitecheck.domain.model.enums import Outcome
from sitecheck.domain.model.runtime_facts import (
    AnimationState,
    LanguageState,
    LayoutMetrics,
    MockVisibility,
    ResourceWeight,
)
from sitecheck.infrastructure.adapters.html_document import HtmlDocument, parse_document

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sitecheck.domain.model.check_result import CheckResult
    from sitecheck.domain.model.check_stats import CheckStats
    from sitecheck.domain.model.enums import RunStatus
    from sitecheck.domain.model.target import Viewport

FIXTURE_SITE = Path(__file__).parent / "fixtures" / "site"

# Default document path for inline HTML snippets
DEFAULT_DOCUMENT = Path("/site/index.html")


# =============================================================================
# Reporter
# =============================================================================


class RecordingReporter(BaseReporter):
    """Reporter that records outcomes instead of printing them."""

    def __init__(self) -> None:
        super().__init__()
        self.results: list[CheckResult] = []
        self.sections: list[str] = []
        self.headings: list[str] = []
        self.verdicts: list[str] = []

    def _emit(self, result: CheckResult) -> None:
        self.results.append(result)

    def _emit_section(self, number: int, title: str) -> None:
        self.sections.append(title)

    def _emit_heading(self, text: str) -> None:
        self.headings.append(text)

    def _emit_summary(self, stats: CheckStats, status: RunStatus, verdict: str) -> None:
        self.verdicts.append(verdict)

    def labels(self, outcome: Outcome | None = None) -> list[str]:
        """Labels in recording order, optionally of one outcome."""
        return [r.label for r in self.results if outcome is None or r.outcome is outcome]

    @property
    def passes(self) -> list[str]:
        return self.labels(Outcome.PASS)

    @property
    def failures(self) -> list[str]:
        return self.labels(Outcome.FAIL)

    @property
    def warnings(self) -> list[str]:
        return self.labels(Outcome.WARN)

    def detail(self, label: str) -> str | None:
        """Detail of the first result with label."""
        for result in self.results:
            if result.label == label:
                return result.detail
        raise KeyError(label)


# =============================================================================
# Documents
# =============================================================================


def make_document(
    body: str = "",
    head: str = "",
    *,
    lang: str = "pt-BR",
    path: Path = DEFAULT_DOCUMENT,
) -> HtmlDocument:
    """Parse a minimal HTML page for tests.

    Args:
        body: Markup inside <body>
        head: Markup inside <head>
        lang: html lang attribute
        path: Document location (base for local references)

    Returns:
        Parsed HtmlDocument
    """
    raw = f'<!DOCTYPE html>\n<html lang="{lang}">\n<head>{head}</head>\n<body>{body}</body>\n</html>\n'
    return parse_document(path, raw)


def copy_fixture_site(destination: Path) -> Path:
    """Copy the reference site into destination; return its index.html."""
    shutil.copytree(FIXTURE_SITE, destination, dirs_exist_ok=True)
    return destination / "index.html"


def patch_document(index: Path, old: str, new: str) -> None:
    """Replace exactly one occurrence of old in the document."""
    raw = index.read_text(encoding="utf-8")
    assert raw.count(old) == 1, f"expected one {old!r} in fixture"
    index.write_text(raw.replace(old, new), encoding="utf-8")


# =============================================================================
# Browser doubles
# =============================================================================


@dataclass
class FakePage:
    """Scripted PageProbe. Every probe returns a healthy default."""

    status: int | None = 200
    load_ms: float = 850.0
    errors: tuple[str, ...] = ()
    layout_metrics: LayoutMetrics = field(
        default_factory=lambda: LayoutMetrics(
            scroll_width=1280,
            inner_width=1280,
            nav_height=64.0,
            mock=MockVisibility(found=True, display="flex", width=300.0, height=600.0),
            footer_height=320.0,
        )
    )
    broken: tuple[str, ...] = ()
    lang: str = "pt-BR"
    language_states: dict[str, LanguageState] = field(
        default_factory=lambda: {
            "en": LanguageState("en", "Your financial life"),
            "pt": LanguageState("pt-BR", "Sua vida financeira"),
        }
    )
    toggle_errors: tuple[str, ...] = ()
    animation: AnimationState = field(
        default_factory=lambda: AnimationState(message_count=3, timeout_set=True, tracking_present=True)
    )
    messages_after_restart: int = 2
    accordion_opens: bool = True
    tab_clickable: bool = True
    retains_input: bool = True
    anchor_top: float | None = 12.0
    weight: ResourceWeight = field(default_factory=lambda: ResourceWeight(count=24, total_kb=900))
    fail_on: frozenset[str] = frozenset()
    waited: list[int] = field(default_factory=list)
    scrolled: list[tuple[int, int]] = field(default_factory=list)

    def _probe(self, name: str) -> None:
        if name in self.fail_on:
            raise ProbeError(name, "Execution context was destroyed")

    def wait(self, ms: int) -> None:
        self.waited.append(ms)

    def layout(self) -> LayoutMetrics:
        self._probe("layout")
        return self.layout_metrics

    def scroll_through(self, step_px: int, pause_ms: int) -> None:
        self._probe("scroll_through")
        self.scrolled.append((step_px, pause_ms))

    def broken_images(self) -> tuple[str, ...]:
        self._probe("broken_images")
        return self.broken

    def document_lang(self) -> str:
        self._probe("document_lang")
        return self.lang

    def switch_language(self, code: str, settle_ms: int) -> LanguageState:
        self._probe("switch_language")
        self.waited.append(settle_ms)
        return self.language_states[code]

    def toggle_languages(self, first: str, second: str, cycles: int, pause_ms: int) -> tuple[str, ...]:
        self._probe("toggle_languages")
        return self.toggle_errors

    def animation_state(self) -> AnimationState:
        self._probe("animation_state")
        return self.animation

    def restart_animation(self, settle_ms: int) -> int:
        self._probe("restart_animation")
        return self.messages_after_restart

    def open_first_accordion(self, settle_ms: int) -> bool:
        self._probe("open_first_accordion")
        return self.accordion_opens

    def click_tab(self, index: int, settle_ms: int) -> bool:
        self._probe("click_tab")
        return self.tab_clickable

    def fill_input(self, selector: str, value: str) -> str | None:
        self._probe("fill_input")
        return value if self.retains_input else ""

    def jump_to_anchor(self, target_id: str, settle_ms: int) -> float | None:
        self._probe("jump_to_anchor")
        return self.anchor_top

    def resource_weight(self) -> ResourceWeight:
        self._probe("resource_weight")
        return self.weight


@dataclass(frozen=True, slots=True)
class OpenCall:
    """One recorded BrowserPort.open() call."""

    url: str
    viewport: Viewport
    wait_until: str
    timeout_ms: int


class FakeBrowser:
    """BrowserPort serving FakePages.

    Args:
        page: Page served for any URL without an override
        pages: Per-URL overrides
        unreachable: URLs whose navigation raises ProbeError
    """

    def __init__(
        self,
        page: FakePage | None = None,
        *,
        pages: dict[str, FakePage] | None = None,
        unreachable: frozenset[str] = frozenset(),
    ) -> None:
        self.page = page or FakePage()
        self.pages = pages or {}
        self.unreachable = unreachable
        self.opened: list[OpenCall] = []
        self.open_contexts = 0

    @contextmanager
    def open(self, url: str, viewport: Viewport, *, wait_until: str, timeout_ms: int) -> Iterator[FakePage]:
        self.opened.append(OpenCall(url, viewport, wait_until, timeout_ms))
        if url in self.unreachable:
            raise ProbeError(f"navigate to {url}", f"Timeout {timeout_ms}ms exceeded.")
        self.open_contexts += 1
        try:
            yield self.pages.get(url, self.page)
        finally:
            self.open_contexts -= 1
