"""Shape-rule schemas built from a validator profile.

Rule tables are plain data: each schema can be inspected, tested and
extended without touching the check-group sequence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitecheck.domain.model.shape_rule import Schema, ShapeRule
from sitecheck.domain.predicates import at_least, contains, equals, is_true, min_length

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import (
        MetaExpectations,
        RequiredSection,
        ValidatorConfig,
    )

PARTNER_LOGOS_FIELD = "bankLogos"


def meta_schema(meta: MetaExpectations) -> Schema:
    """Head metadata rules."""

    def exact(value: str) -> str:
        return f"Expected {value!r}"

    def longer(minimum: int) -> str:
        return f"Expected at least {minimum} characters"

    return Schema(
        name="meta tags",
        rules=(
            ShapeRule("charset", equals(meta.charset), exact(meta.charset)),
            ShapeRule(
                "viewport",
                contains(meta.viewport_contains),
                f"Expected to contain {meta.viewport_contains!r}",
            ),
            ShapeRule("title", min_length(meta.min_title_length), longer(meta.min_title_length)),
            ShapeRule(
                "description",
                min_length(meta.min_description_length),
                longer(meta.min_description_length),
            ),
            ShapeRule("ogTitle", min_length(meta.min_og_title_length), longer(meta.min_og_title_length)),
            ShapeRule(
                "ogDescription",
                min_length(meta.min_og_description_length),
                longer(meta.min_og_description_length),
            ),
            ShapeRule("ogType", equals(meta.og_type), exact(meta.og_type)),
            ShapeRule("ogLocale", equals(meta.og_locale), exact(meta.og_locale)),
            ShapeRule("ogImage", min_length(meta.min_og_image_length), longer(meta.min_og_image_length)),
            ShapeRule("lang", equals(meta.lang), exact(meta.lang)),
        ),
    )


def section_schema(sections: tuple[RequiredSection, ...]) -> Schema:
    """One presence rule per required landmark."""
    return Schema(
        name="required sections",
        rules=tuple(
            ShapeRule(section.name, is_true(), f"Expected {section.selector!r} in document")
            for section in sections
        ),
    )


def content_schema(config: ValidatorConfig) -> Schema:
    """Minimum counts of repeating units, partner logos last."""
    rules = [
        ShapeRule(item.name, at_least(item.minimum), item.message) for item in config.content_minimums
    ]
    rules.append(
        ShapeRule(
            PARTNER_LOGOS_FIELD,
            at_least(config.min_partner_logos),
            f"Expected at least {config.min_partner_logos} bank logos",
        )
    )
    return Schema(name="content counts", rules=tuple(rules))


def translation_schema(keys: tuple[str, ...]) -> Schema:
    """One presence rule per translation identifier."""
    return Schema(
        name="translation keys",
        rules=tuple(ShapeRule(key, is_true(), f"{key} not found in JS") for key in keys),
    )
