"""Structural validator: static checks over one HTML document.

Groups run in a fixed order:
- markup: meta tags, sections, content structure, images, compliance
- filesystem: asset files, internal links
- script: translations, chat data
- text: content quality, external dependencies
"""

from sitecheck.application.structural._base import StructuralCheck
from sitecheck.application.structural._registry import default_checks
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
from sitecheck.application.structural.validator import VALIDATOR_VERDICTS, StructuralValidator

__all__ = [
    # Base
    "StructuralCheck",
    # Groups
    "MetaTagsCheck",
    "RequiredSectionsCheck",
    "ContentStructureCheck",
    "AssetFilesCheck",
    "InternalLinksCheck",
    "ImageAttributesCheck",
    "TranslationsCheck",
    "ChatDataCheck",
    "ComplianceCheck",
    "ContentQualityCheck",
    "ExternalDependenciesCheck",
    # Runner
    "StructuralValidator",
    "VALIDATOR_VERDICTS",
    "default_checks",
]
