"""Shared CLI plumbing: common options and fatal error handling."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from sitecheck.domain.exceptions.base import SiteCheckError
from sitecheck.infrastructure.logging_setup import configure_logging

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from sitecheck.domain.model.enums import RunStatus

logger = logging.getLogger(__name__)

# Exit code when the run could not complete
EXIT_FATAL = 2


def add_common_options(parser: argparse.ArgumentParser) -> None:
    """--config, --no-color and -v."""
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help="TOML profile overriding the built-in check profile",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr",
    )


def run_command(
    argv: Sequence[str] | None,
    parser: argparse.ArgumentParser,
    command: Callable[[argparse.Namespace, Console], RunStatus],
) -> int:
    """Parse argv, run command and map the outcome to an exit code.

    Args:
        argv: Arguments (default: sys.argv[1:])
        parser: Parser with common options added
        command: Runs the checks, printing to the given console

    Returns:
        0 on success (warnings allowed), 1 on failure, 2 on a fatal error
    """
    args = parser.parse_args(argv)
    configure_logging(args.verbose, no_color=args.no_color)
    # report lines stay unwrapped in CI logs
    stdout = Console(highlight=False, no_color=args.no_color, soft_wrap=True)
    stderr = Console(stderr=True, highlight=False, no_color=args.no_color, soft_wrap=True)

    try:
        status = command(args, stdout)
    except SiteCheckError as e:
        _fatal(stderr, str(e))
        return EXIT_FATAL
    except Exception as e:
        logger.debug("unexpected error", exc_info=True)
        _fatal(stderr, f"{type(e).__name__}: {e}")
        return EXIT_FATAL
    return status.exit_code


def _fatal(console: Console, message: str) -> None:
    console.print(Text.assemble(("Fatal error:", "bold red"), " ", message))
