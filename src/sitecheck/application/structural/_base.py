"""Base class for structural check groups.

Provides the shape every group in the static pipeline shares.
Concrete groups inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import ValidatorConfig
    from sitecheck.domain.ports.reporter import ReporterProtocol
    from sitecheck.infrastructure.adapters.html_document import HtmlDocument


class StructuralCheck(ABC):
    """One numbered group of the structural validator.

    Concrete groups must:
    1. Set `title` class attribute
    2. Implement `run()`, recording at least one result

    Example:
        class MyCheck(StructuralCheck):
            title = "My Check"

            def run(
                self,
                document: HtmlDocument,
                config: ValidatorConfig,
                reporter: ReporterProtocol,
            ) -> None:
                reporter.check("Has a title", document.exists("title"))
    """

    title: str
    """Section heading shown before the group's results."""

    @abstractmethod
    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        """Inspect document and record outcomes.

        Args:
            document: Parsed target document
            config: Validator profile
            reporter: Destination for outcomes

        Raises:
            ExtractionError: If a fact cannot be derived from document
        """
