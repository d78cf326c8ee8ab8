"""Check groups over document markup: head, landmarks, content, images, legal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitecheck.application.services.schema_reporting import report_schema
from sitecheck.application.services.schemas import (
    content_schema,
    meta_schema,
    section_schema,
)
from sitecheck.application.structural._base import StructuralCheck
from sitecheck.application.structural.facts import content_facts, meta_facts, section_facts
from sitecheck.infrastructure.adapters.html_document import attribute

if TYPE_CHECKING:
    from bs4 import Tag

    from sitecheck.domain.model.configuration import CardLayout, ValidatorConfig
    from sitecheck.domain.ports.reporter import ReporterProtocol
    from sitecheck.infrastructure.adapters.html_document import HtmlDocument


class MetaTagsCheck(StructuralCheck):
    """Head metadata schema plus favicon presence."""

    title = "Meta Tags"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        report_schema(
            reporter,
            meta_schema(config.meta),
            meta_facts(document),
            pass_label="All meta tags valid",
            fail_prefix="Meta",
        )
        reporter.check("Favicon present", document.exists(config.favicon_selector))


class RequiredSectionsCheck(StructuralCheck):
    """Every configured landmark exists."""

    title = "Required Sections"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        report_schema(
            reporter,
            section_schema(config.sections),
            section_facts(document, config.sections),
            pass_label="All required sections present",
            fail_prefix="Missing section",
        )


class ContentStructureCheck(StructuralCheck):
    """Minimum counts of repeating units and per-card completeness."""

    title = "Content Structure"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        facts = content_facts(document, config)
        summary = ", ".join(f"{value} {name}" for name, value in facts.items())
        report_schema(
            reporter,
            content_schema(config),
            facts,
            pass_label=f"Content structure valid ({summary})",
            fail_prefix="Content",
        )

        cards = document.select(config.cards.selector)
        incomplete = 0
        for index, card in enumerate(cards):
            problem = _card_problem(card, config.cards)
            if problem is not None:
                incomplete += 1
                reporter.record_fail(f"Agent card {index} incomplete", problem)

        # zero cards is already a content count failure
        if cards and not incomplete:
            reporter.record_pass(f"All {len(cards)} agent cards have label, title, body, and tags")


def _card_problem(card: Tag, layout: CardLayout) -> str | None:
    """Detail line for an incomplete card, None if complete."""
    label = _joined_text(card, layout.label_selector)
    title = _joined_text(card, layout.title_selector)
    body = _joined_text(card, layout.body_selector)
    tags = len(card.select(layout.tag_selector))

    if label and title and body and tags >= layout.min_tags:
        return None
    return f'label="{label[:20]}" title="{title[:20]}" tags={tags}'


def _joined_text(root: Tag, selector: str) -> str:
    return "".join(element.get_text() for element in root.select(selector)).strip()


class ImageAttributesCheck(StructuralCheck):
    """Alt text on every image, intrinsic size on lazy raster images."""

    title = "Image Accessibility & Performance"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        missing_alt: list[str] = []
        lazy_without_size: list[str] = []

        for img in document.select("img"):
            src = attribute(img, "src")
            if not src or src.startswith("data:"):
                continue
            name = src.rsplit("/", 1)[-1]

            if not img.has_attr("alt"):
                missing_alt.append(name)

            is_svg = src.split("?", 1)[0].split("#", 1)[0].lower().endswith(".svg")
            sized = bool(attribute(img, "width")) and bool(attribute(img, "height"))
            if attribute(img, "loading") == "lazy" and not sized and not is_svg:
                lazy_without_size.append(name)

        if missing_alt:
            for name in missing_alt:
                reporter.record_fail(f"Missing alt: {name}")
        else:
            reporter.record_pass("All images have alt attributes")

        if lazy_without_size:
            for name in lazy_without_size:
                reporter.record_fail(
                    f"Lazy image without dimensions: {name}",
                    "Browser may not load images in collapsed containers",
                )
        else:
            reporter.record_pass("All lazy-loaded images have width/height")


class ComplianceCheck(StructuralCheck):
    """Legal links, company disclosure and consent text."""

    title = "Legal & Compliance"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        hrefs = [attribute(a, "href") for a in document.select("a[href]")]
        for link in config.legal_links:
            reporter.check(link.label, any(link.text in href for href in hrefs))

        footer = document.footer_text
        for required in config.footer_texts:
            reporter.check(required.label, required.text in footer)

        body = document.body_text
        for required in config.body_texts:
            reporter.check(required.label, required.text in body)
