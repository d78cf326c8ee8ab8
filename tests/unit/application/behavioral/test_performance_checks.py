"""Tests for behavioral/performance_checks.py."""

import pytest

from sitecheck.application.behavioral.performance_checks import (
    PerformanceCheck,
    classify_load,
    classify_weight,
)
from sitecheck.domain.model.configuration import ProberConfig
from sitecheck.domain.model.enums import Outcome
from sitecheck.domain.model.runtime_facts import ResourceWeight
from tests.factories import FakeBrowser, FakePage, RecordingReporter

BASE_URL = "http://localhost:8765"


class TestClassification:
    """Tests for the threshold functions."""

    @pytest.mark.parametrize(
        ("load_ms", "expected"),
        [
            (0, Outcome.PASS),
            (2999, Outcome.PASS),
            (3000, Outcome.WARN),
            (4999, Outcome.WARN),
            (5000, Outcome.FAIL),
            (12000, Outcome.FAIL),
        ],
    )
    def test_load(self, load_ms: int, expected: Outcome) -> None:
        """Under 3000 passes, under 5000 warns, otherwise fails."""
        assert classify_load(load_ms, 3000, 5000) is expected

    def test_weight(self) -> None:
        """Weight at the limit warns, never fails."""
        assert classify_weight(4999, 5000) is Outcome.PASS
        assert classify_weight(5000, 5000) is Outcome.WARN


class TestPerformanceCheck:
    """Tests for PerformanceCheck."""

    def test_fast_light_page(self) -> None:
        """Fast and light page passes both checks."""
        browser = FakeBrowser(FakePage(load_ms=812.4))
        reporter = RecordingReporter()

        PerformanceCheck().run(browser, ProberConfig(), BASE_URL, reporter)

        assert reporter.passes == ["Page load: 812ms", "Total resources: 24 files, 900KB"]
        assert browser.opened[0].wait_until == "load"
        assert browser.opened[0].timeout_ms == 30000

    def test_slow_heavy_page(self) -> None:
        """Too slow fails, too heavy warns."""
        page = FakePage(load_ms=6200.0, weight=ResourceWeight(count=180, total_kb=7400))
        reporter = RecordingReporter()

        PerformanceCheck().run(FakeBrowser(page), ProberConfig(), BASE_URL, reporter)

        assert reporter.failures == ["Page load: 6200ms"]
        assert reporter.detail("Page load: 6200ms") == "Too slow"
        assert reporter.warnings == ["Total resources: 180 files, 7400KB"]

    def test_borderline_load_warns(self) -> None:
        """Between thresholds warns with a hint."""
        reporter = RecordingReporter()
        PerformanceCheck().run(FakeBrowser(FakePage(load_ms=3500.0)), ProberConfig(), BASE_URL, reporter)
        assert reporter.warnings == ["Page load: 3500ms"]
        assert reporter.detail("Page load: 3500ms") == "Consider optimizing"
