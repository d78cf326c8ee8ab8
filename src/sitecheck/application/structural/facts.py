"""Fact extraction from the static document.

Each function derives a flat FactSet that a schema is evaluated against.
Absent elements yield empty strings or zero counts, never errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitecheck.application.services.schemas import PARTNER_LOGOS_FIELD

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import RequiredSection, ValidatorConfig
    from sitecheck.domain.model.shape_rule import FactValue
    from sitecheck.infrastructure.adapters.html_document import HtmlDocument


def meta_facts(document: HtmlDocument) -> dict[str, FactValue]:
    """Head metadata as named string facts."""
    return {
        "charset": document.attr("meta[charset]", "charset"),
        "viewport": document.attr('meta[name="viewport"]', "content"),
        "title": document.text("title"),
        "description": document.attr('meta[name="description"]', "content"),
        "ogTitle": document.attr('meta[property="og:title"]', "content"),
        "ogDescription": document.attr('meta[property="og:description"]', "content"),
        "ogType": document.attr('meta[property="og:type"]', "content"),
        "ogLocale": document.attr('meta[property="og:locale"]', "content"),
        "ogImage": document.attr('meta[property="og:image"]', "content"),
        "lang": document.attr("html", "lang"),
    }


def section_facts(
    document: HtmlDocument,
    sections: tuple[RequiredSection, ...],
) -> dict[str, FactValue]:
    """Presence flag per required landmark."""
    return {section.name: document.exists(section.selector) for section in sections}


def content_facts(document: HtmlDocument, config: ValidatorConfig) -> dict[str, FactValue]:
    """Counts of repeating units plus partner logos."""
    facts: dict[str, FactValue] = {
        item.name: document.count(item.selector) for item in config.content_minimums
    }
    facts[PARTNER_LOGOS_FIELD] = partner_logo_count(document, config.partner_logos)
    return facts


def partner_logo_count(document: HtmlDocument, names: tuple[str, ...]) -> int:
    """Images whose alt text exactly names a partner."""
    wanted = frozenset(names)
    return sum(1 for img in document.select("img[alt]") if str(img.get("alt")) in wanted)


def translation_facts(script: str, keys: tuple[str, ...]) -> dict[str, FactValue]:
    """Whether each identifier occurs in the inline script."""
    return {key: key in script for key in keys}
