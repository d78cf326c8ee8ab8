"""Tests for behavioral/prober.py and the check registry."""

from sitecheck.application.behavioral import (
    PROBER_VERDICTS,
    BehavioralProber,
    default_checks,
)
from sitecheck.domain.model.configuration import ProberConfig
from sitecheck.domain.model.enums import RunStatus
from tests.factories import FakeBrowser, FakePage, RecordingReporter

BASE_URL = "http://localhost:8765"

EXPECTED_TITLES = [
    "Page Load",
    "Responsive Layout",
    "Images",
    "Language Switching",
    "Chat Animation",
    "Interactive Elements",
    "Performance",
]


class TestRegistry:
    """Tests for default_checks()."""

    def test_fixed_order(self) -> None:
        """Seven groups in reporting order."""
        assert [check.title for check in default_checks()] == EXPECTED_TITLES


class TestBehavioralProber:
    """Tests for BehavioralProber.run()."""

    def test_healthy_site(self) -> None:
        """Healthy fake site passes every group."""
        reporter = RecordingReporter()

        status = BehavioralProber(ProberConfig(), reporter).run(FakeBrowser(), BASE_URL)

        assert status is RunStatus.SUCCESS
        assert reporter.sections == EXPECTED_TITLES
        assert reporter.headings == [f"Browser QA - {BASE_URL}"]
        assert reporter.verdicts == [PROBER_VERDICTS.success]

    def test_every_context_closed(self) -> None:
        """No context is left open after the run."""
        browser = FakeBrowser()
        BehavioralProber(ProberConfig(), RecordingReporter()).run(browser, BASE_URL)
        assert browser.open_contexts == 0
        # 3 routes + 4 viewports + 5 single-page groups
        assert len(browser.opened) == 12

    def test_probe_error_isolated_to_group(self) -> None:
        """A failing probe fails its group and later groups still run."""
        page = FakePage(fail_on=frozenset({"animation_state"}))
        reporter = RecordingReporter()

        status = BehavioralProber(ProberConfig(), reporter).run(FakeBrowser(page), BASE_URL)

        assert status is RunStatus.FAILURE
        assert "Chat Animation could not be checked" in reporter.failures
        assert reporter.sections == EXPECTED_TITLES
        assert "Page load: 850ms" in reporter.passes

    def test_unreachable_home(self) -> None:
        """Unreachable home fails every group without aborting."""
        browser = FakeBrowser(unreachable=frozenset({f"{BASE_URL}/"}))
        reporter = RecordingReporter()

        status = BehavioralProber(ProberConfig(), reporter).run(browser, BASE_URL)

        assert status is RunStatus.FAILURE
        assert reporter.sections == EXPECTED_TITLES
        assert "Performance could not be checked" in reporter.failures
        assert "Privacy Policy loads (HTTP 200)" in reporter.passes
