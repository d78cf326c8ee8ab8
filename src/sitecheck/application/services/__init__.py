"""Application services: schema construction and reporting."""

from sitecheck.application.services.schema_reporting import report_schema
from sitecheck.application.services.schemas import (
    PARTNER_LOGOS_FIELD,
    content_schema,
    meta_schema,
    section_schema,
    translation_schema,
)

__all__ = [
    "PARTNER_LOGOS_FIELD",
    "content_schema",
    "meta_schema",
    "report_schema",
    "section_schema",
    "translation_schema",
]
