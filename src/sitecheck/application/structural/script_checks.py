"""Check groups over the inline script source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitecheck.application.services.schema_reporting import report_schema
from sitecheck.application.services.schemas import translation_schema
from sitecheck.application.structural._base import StructuralCheck
from sitecheck.application.structural.facts import translation_facts
from sitecheck.application.structural.script_patterns import (
    array_literal,
    count_markers,
    declares_function,
    initializes,
    reads_storage_key,
)

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import ValidatorConfig
    from sitecheck.domain.ports.reporter import ReporterProtocol
    from sitecheck.infrastructure.adapters.html_document import HtmlDocument


class TranslationsCheck(StructuralCheck):
    """Translation tables, i18n functions and language initialization."""

    title = "Translations"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        script = document.script_text

        report_schema(
            reporter,
            translation_schema(config.translation_keys),
            translation_facts(script, config.translation_keys),
            pass_label=f"All {len(config.translation_keys)} translation objects present",
            fail_prefix="Translation",
        )

        for name in config.function_names:
            reporter.check(f"{name}() function exists", declares_function(script, name))

        for identifier in config.tracking_identifiers:
            reporter.check(f"{identifier} tracking exists", identifier in script)

        reporter.check(
            "No localStorage language auto-restore on load",
            not reads_storage_key(script, config.forbidden_storage_key),
            "Page must always open in the default language",
        )

        variable, value = config.default_lang_variable, config.default_lang_value
        reporter.check(f'Default {variable} is "{value}"', initializes(script, variable, value))


class ChatDataCheck(StructuralCheck):
    """Each scripted conversation variant holds the expected count."""

    title = "Chat Data Structure"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        script = document.script_text
        for variant in config.conversations:
            body = array_literal(script, variant.variable)
            if body is None:
                reporter.record_fail(f"{variant.name} {variant.variable} not found")
                continue
            found = count_markers(body, config.conversation_marker)
            reporter.check(
                f"{variant.name} chat data has {variant.expected_count} conversations",
                found == variant.expected_count,
                f"Found {found}",
            )
