"""Diagnostic logging to stderr via rich.

The check report owns stdout; log records never interleave with it.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT = "sitecheck"


def configure_logging(verbose: bool = False, *, no_color: bool = False) -> None:
    """Install a RichHandler on the package logger.

    Args:
        verbose: DEBUG instead of WARNING
        no_color: Disable styling on the stderr console
    """
    handler = RichHandler(
        console=Console(stderr=True, no_color=no_color),
        show_path=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger(_ROOT)
    # replace handlers from a previous call in the same process
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
