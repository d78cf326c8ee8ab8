"""Browser adapter implementing BrowserPort and PageProbe with Playwright."""

from sitecheck.infrastructure.browser.playwright_browser import PlaywrightBrowser, PlaywrightPage

__all__ = [
    "PlaywrightBrowser",
    "PlaywrightPage",
]
