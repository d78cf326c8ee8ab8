"""Adapters for static documents and the local filesystem."""

from sitecheck.infrastructure.adapters.html_document import (
    HtmlDocument,
    load_document,
    parse_document,
)
from sitecheck.infrastructure.adapters.local_files import (
    is_local_reference,
    link_target_exists,
    reference_exists,
    resolve_reference,
)

__all__ = [
    "HtmlDocument",
    "load_document",
    "parse_document",
    "is_local_reference",
    "link_target_exists",
    "reference_exists",
    "resolve_reference",
]
