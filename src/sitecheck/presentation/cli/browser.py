"""sitecheck-browser: runtime checks against a served site."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from sitecheck.application.behavioral.prober import BehavioralProber
from sitecheck.application.reporters.console import RichReporter
from sitecheck.infrastructure.browser.playwright_browser import PlaywrightBrowser
from sitecheck.infrastructure.config.loader import load_prober_config
from sitecheck.presentation.cli._common import add_common_options, run_command

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from sitecheck.domain.model.enums import RunStatus


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitecheck-browser",
        description="Drive a real browser through a served landing page",
    )
    parser.add_argument(
        "url",
        nargs="?",
        default=None,
        help="Site root (default: base_url of the profile, http://localhost:8765)",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )
    add_common_options(parser)
    return parser


def _probe(args: argparse.Namespace, console: Console) -> RunStatus:
    config = load_prober_config(args.config)
    base_url = args.url or config.base_url
    with PlaywrightBrowser.launch(config, headless=not args.headed) as browser:
        return BehavioralProber(config, RichReporter(console)).run(browser, base_url)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    return run_command(argv, build_parser(), _probe)


if __name__ == "__main__":
    sys.exit(main())
