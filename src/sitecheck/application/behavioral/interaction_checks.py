"""Check groups driving page scripts: language, chat animation, controls."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitecheck.application.behavioral._base import BehavioralCheck

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import ProberConfig
    from sitecheck.domain.ports.browser import BrowserPort
    from sitecheck.domain.ports.reporter import ReporterProtocol


class LanguageSwitchCheck(BehavioralCheck):
    """Default language, a round trip through both languages, rapid toggling."""

    title = "Language Switching"

    def run(
        self,
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        reporter: ReporterProtocol,
    ) -> None:
        first, second = config.languages

        with self.open_home(browser, config, base_url) as page:
            lang = page.document_lang()
            if lang == config.default_lang:
                reporter.record_pass(f"Default language is {config.default_lang}")
            else:
                reporter.record_fail("Default language", f"Expected {config.default_lang}, got {lang}")

            steps = ((f"Switch to {first.name}", first), (f"Switch back to {second.name}", second))
            for label, expected in steps:
                state = page.switch_language(expected.code, config.switch_settle_ms)
                if state.matches(expected.lang, expected.heading_fragment):
                    reporter.record_pass(f"{label} works")
                else:
                    reporter.record_fail(label, f"lang={state.lang!r} heading={state.heading!r}")

            errors = page.toggle_languages(
                first.code,
                second.code,
                config.toggle_cycles,
                config.toggle_pause_ms,
            )

        if not errors:
            reporter.record_pass(f"Rapid language switching ({config.toggle_cycles} cycles) - no errors")
        for error in errors:
            reporter.record_fail("Stress test error", error)


class ChatAnimationCheck(BehavioralCheck):
    """Chat animation renders, is tracked, and survives a restart."""

    title = "Chat Animation"

    def run(
        self,
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        reporter: ReporterProtocol,
    ) -> None:
        with self.open_home(browser, config, base_url) as page:
            page.wait(config.animation_settle_ms)
            state = page.animation_state()

            if state.message_count > 0:
                reporter.record_pass(f"Chat animation running ({state.message_count} messages visible)")
            else:
                reporter.record_fail("Chat animation not running")

            if state.timeout_set:
                reporter.record_pass("Chat cycle timeout is set")
            else:
                reporter.record_fail("Chat cycle timeout missing")

            if state.tracking_present:
                reporter.record_pass("Animation timeout tracking array exists")
            else:
                reporter.record_fail("Animation timeout tracking missing")

            after_restart = page.restart_animation(config.restart_settle_ms)

        if after_restart > 0:
            reporter.record_pass("Chat restarts cleanly with new messages")
        else:
            reporter.record_fail("Chat restart produced no messages")


class InteractiveElementsCheck(BehavioralCheck):
    """Accordion, tabs, form input and in-page navigation respond.

    Accordion and smooth scroll depend on timing, so they only warn.
    """

    title = "Interactive Elements"

    def run(
        self,
        browser: BrowserPort,
        config: ProberConfig,
        base_url: str,
        reporter: ReporterProtocol,
    ) -> None:
        selectors = config.selectors

        with self.open_home(browser, config, base_url) as page:
            if page.open_first_accordion(config.accordion_settle_ms):
                reporter.record_pass("FAQ accordion opens on click")
            else:
                reporter.record_warn("FAQ accordion may not be working (check manually)")

            if page.click_tab(1, config.tab_settle_ms):
                reporter.record_pass("Agent tabs are clickable")
            else:
                reporter.record_fail("Agent tabs not working")

            retained = page.fill_input(selectors.phone_input, config.phone_sample)
            if retained == config.phone_sample:
                reporter.record_pass("Hero form accepts input")
            else:
                reporter.record_fail("Hero form input broken")

            top = page.jump_to_anchor(selectors.anchor_target_id, config.anchor_settle_ms)
            if top is not None and top < config.anchor_max_top_px:
                reporter.record_pass("Navigation scrolls to sections")
            else:
                reporter.record_warn("Smooth scroll may not be working (check manually)")
