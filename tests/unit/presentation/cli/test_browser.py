"""Tests for the sitecheck-browser entry point.

PlaywrightBrowser is swapped for a launcher serving fake pages.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import pytest

from sitecheck.domain.exceptions.probe import BrowserLaunchError
from sitecheck.presentation.cli import browser as browser_cli
from tests.factories import FakeBrowser, FakePage

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sitecheck.domain.model.configuration import ProberConfig


class FakeLauncher:
    """Stands in for PlaywrightBrowser.launch()."""

    def __init__(self, page: FakePage | None = None, *, error: str | None = None) -> None:
        self.browser = FakeBrowser(page)
        self.error = error
        self.headless: list[bool] = []

    @contextmanager
    def launch(self, config: ProberConfig, *, headless: bool = True) -> Iterator[FakeBrowser]:
        self.headless.append(headless)
        if self.error:
            raise BrowserLaunchError(self.error)
        yield self.browser


@pytest.fixture
def launcher(monkeypatch: pytest.MonkeyPatch) -> FakeLauncher:
    fake = FakeLauncher()
    monkeypatch.setattr(browser_cli, "PlaywrightBrowser", fake)
    return fake


class TestBrowserCommand:
    """Tests for main()."""

    def test_healthy_site(self, launcher: FakeLauncher, capsys: pytest.CaptureFixture[str]) -> None:
        """Healthy site exits 0, headless, against the default base URL."""
        exit_code = browser_cli.main(["--no-color"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Browser QA - http://localhost:8765" in out
        assert "ALL BROWSER CHECKS PASSED" in out
        assert launcher.headless == [True]
        assert launcher.browser.opened[0].url == "http://localhost:8765/"

    def test_url_and_headed(self, launcher: FakeLauncher) -> None:
        """Positional URL and --headed are honored."""
        browser_cli.main(["https://staging.example.com", "--headed", "--no-color"])

        assert launcher.headless == [False]
        assert launcher.browser.opened[0].url == "https://staging.example.com/"

    def test_failed_checks(
        self,
        launcher: FakeLauncher,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """A failing probe exits 1."""
        launcher.browser.page = FakePage(status=500)

        assert browser_cli.main(["--no-color"]) == 1
        assert "BROWSER QA FAILED" in capsys.readouterr().out

    def test_launch_failure(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Browser that cannot start is fatal."""
        monkeypatch.setattr(browser_cli, "PlaywrightBrowser", FakeLauncher(error="Executable doesn't exist"))

        exit_code = browser_cli.main(["--no-color"])

        captured = capsys.readouterr()
        assert exit_code == 2
        assert "Fatal error:" in captured.err
        assert "Browser failed to launch: Executable doesn't exist" in captured.err
