"""Structural check registry.

Central registry of all check groups with a factory function.
"""

from __future__ import annotations

from sitecheck.application.structural._base import StructuralCheck
from sitecheck.application.structural.filesystem_checks import AssetFilesCheck, InternalLinksCheck
from sitecheck.application.structural.markup_checks import (
    ComplianceCheck,
    ContentStructureCheck,
    ImageAttributesCheck,
    MetaTagsCheck,
    RequiredSectionsCheck,
)
from sitecheck.application.structural.script_checks import ChatDataCheck, TranslationsCheck
from sitecheck.application.structural.text_checks import (
    ContentQualityCheck,
    ExternalDependenciesCheck,
)

# Registry - tuple for immutability
# Order matters: groups are numbered and reported in this order
_ALL_CHECKS: tuple[type[StructuralCheck], ...] = (
    MetaTagsCheck,
    RequiredSectionsCheck,
    ContentStructureCheck,
    AssetFilesCheck,
    InternalLinksCheck,
    ImageAttributesCheck,
    TranslationsCheck,
    ChatDataCheck,
    ComplianceCheck,
    ContentQualityCheck,
    ExternalDependenciesCheck,
)


def default_checks() -> tuple[StructuralCheck, ...]:
    """Instantiate every structural check group in run order."""
    return tuple(check_cls() for check_cls in _ALL_CHECKS)
