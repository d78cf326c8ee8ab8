"""Check groups over raw and visible text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from sitecheck.application.structural._base import StructuralCheck

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import ValidatorConfig
    from sitecheck.domain.ports.reporter import ReporterProtocol
    from sitecheck.infrastructure.adapters.html_document import HtmlDocument


def contains_marker(raw: str, tokens: tuple[str, ...]) -> bool:
    """A marker token followed by whitespace or a colon, any case."""
    if not tokens:
        return False
    alternatives = "|".join(re.escape(token) for token in tokens)
    return re.search(rf"(?:{alternatives})(?:\s|:)", raw, re.IGNORECASE) is not None


class ContentQualityCheck(StructuralCheck):
    """Deprecated names fail; editorial leftovers only warn."""

    title = "Typography & Content Quality"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        raw_lower = document.raw.lower()
        for name in config.deprecated_names:
            reporter.check(
                f'No references to old name "{name.capitalize()}"',
                name.lower() not in raw_lower,
                "Product was renamed",
            )

        tokens = "/".join(config.marker_tokens)
        if contains_marker(document.raw, config.marker_tokens):
            reporter.record_warn(f"Found {tokens} comments in HTML")
        else:
            reporter.record_pass(f"No {tokens} comments")

        char = config.discouraged_character
        if char and char in document.body_text:
            reporter.record_warn(f"'{char}' found in visible text", "Style guide prefers periods/commas")
        else:
            reporter.record_pass(f"No '{char}' in visible text")

        phone = config.placeholder_phone
        if phone and phone in document.raw:
            reporter.record_warn(f"WhatsApp uses placeholder number ({phone})", "Replace before launch")
        else:
            reporter.record_pass("WhatsApp number is not a placeholder")

        placeholders = document.count('footer a[href="#"]')
        if placeholders:
            reporter.record_warn(
                f'{placeholders} placeholder social links (href="#") in footer',
                "Add real social URLs before launch",
            )
        else:
            reporter.record_pass("All footer links have real URLs")


class ExternalDependenciesCheck(StructuralCheck):
    """Third-party origins the page relies on are referenced."""

    title = "External Dependencies"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        for origin in config.required_origins:
            reporter.check(f"CDN loaded: {origin}", origin in document.raw)
