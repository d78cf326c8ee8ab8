"""sitecheck-validate: structural pre-deploy checks on a static document."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from sitecheck.application.reporters.console import RichReporter
from sitecheck.application.structural.validator import StructuralValidator
from sitecheck.infrastructure.adapters.html_document import load_document
from sitecheck.infrastructure.config.loader import load_validator_config
from sitecheck.presentation.cli._common import add_common_options, run_command

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from sitecheck.domain.model.enums import RunStatus


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitecheck-validate",
        description="Validate a static landing page before deploying it",
    )
    parser.add_argument(
        "--document",
        type=Path,
        default=None,
        metavar="PATH",
        help="HTML document to validate (default: index.html in the working directory)",
    )
    add_common_options(parser)
    return parser


def _validate(args: argparse.Namespace, console: Console) -> RunStatus:
    config = load_validator_config(args.config)
    path = args.document if args.document is not None else Path(config.document)
    document = load_document(path)
    return StructuralValidator(config, RichReporter(console)).run(document)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    return run_command(argv, build_parser(), _validate)


if __name__ == "__main__":
    sys.exit(main())
