"""Structural validator: runs the static check groups over one document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sitecheck.application.reporters._base import Verdicts
from sitecheck.application.structural._registry import default_checks
from sitecheck.domain.exceptions.extraction import ExtractionError

if TYPE_CHECKING:
    from sitecheck.application.reporters._base import BaseReporter
    from sitecheck.application.structural._base import StructuralCheck
    from sitecheck.domain.model.configuration import ValidatorConfig
    from sitecheck.domain.model.enums import RunStatus
    from sitecheck.infrastructure.adapters.html_document import HtmlDocument

logger = logging.getLogger(__name__)

VALIDATOR_VERDICTS = Verdicts(
    success="ALL CHECKS PASSED - Ready to deploy",
    warnings="PASSED WITH WARNINGS - Review before deploying",
    failure="VALIDATION FAILED - Fix issues before deploying",
)


class StructuralValidator:
    """Pre-deploy validation of a static HTML document.

    Groups run in registry order and never abort the run: an extraction
    error inside one group becomes a single failure for that group.

    Example:
        validator = StructuralValidator(ValidatorConfig(), RichReporter())
        status = validator.run(load_document(Path("index.html")))
        sys.exit(status.exit_code)
    """

    def __init__(
        self,
        config: ValidatorConfig,
        reporter: BaseReporter,
        checks: tuple[StructuralCheck, ...] | None = None,
    ) -> None:
        """Initialize validator.

        Args:
            config: Validator profile
            reporter: Destination for outcomes
            checks: Groups to run (default: every registered group)
        """
        self._config = config
        self._reporter = reporter
        self._checks = default_checks() if checks is None else checks

    def run(self, document: HtmlDocument) -> RunStatus:
        """Run every group and render the summary.

        Args:
            document: Parsed target document

        Returns:
            Final run status
        """
        self._reporter.heading(f"Validating {document.path}")
        for check in self._checks:
            self._reporter.section(check.title)
            try:
                check.run(document, self._config, self._reporter)
            except ExtractionError as e:
                logger.warning("%s: %s", check.title, e)
                self._reporter.record_fail(f"{check.title} could not be checked", str(e))
        return self._reporter.render_summary(VALIDATOR_VERDICTS)
