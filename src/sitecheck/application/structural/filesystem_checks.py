"""Check groups resolving document references against the filesystem."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from sitecheck.application.structural._base import StructuralCheck
from sitecheck.infrastructure.adapters.html_document import attribute
from sitecheck.infrastructure.adapters.local_files import (
    is_local_reference,
    link_target_exists,
    reference_exists,
)

if TYPE_CHECKING:
    from sitecheck.domain.model.configuration import ValidatorConfig
    from sitecheck.domain.ports.reporter import ReporterProtocol
    from sitecheck.infrastructure.adapters.html_document import HtmlDocument

logger = logging.getLogger(__name__)

_CSS_URL = re.compile(r"""url\(['"]?([^'")\s]+)['"]?\)""")


def local_asset_references(document: HtmlDocument) -> tuple[str, ...]:
    """Distinct local asset references in first-seen order.

    Sources: img[src], link[href], then CSS url(...) anywhere in the
    raw text.
    """
    candidates = [attribute(img, "src") for img in document.select("img[src]")]
    candidates += [attribute(link, "href") for link in document.select("link[href]")]
    candidates += _CSS_URL.findall(document.raw)
    # dict preserves insertion order
    return tuple(dict.fromkeys(ref for ref in candidates if is_local_reference(ref)))


class AssetFilesCheck(StructuralCheck):
    """Every local asset reference exists on disk."""

    title = "Asset Files"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        refs = local_asset_references(document)
        missing = [ref for ref in refs if not reference_exists(document.base_dir, ref)]
        logger.debug("%d local assets, %d missing", len(refs), len(missing))

        if not missing:
            reporter.record_pass(f"All {len(refs)} local assets exist on disk")
            return
        for ref in missing:
            reporter.record_fail(f"Missing asset: {ref}")


class InternalLinksCheck(StructuralCheck):
    """Same-page anchors hit an id, relative links hit a file."""

    title = "Internal Links"

    def run(
        self,
        document: HtmlDocument,
        config: ValidatorConfig,
        reporter: ReporterProtocol,
    ) -> None:
        ids = document.ids
        broken_anchors: list[str] = []
        broken_links: list[str] = []

        for anchor in document.select("a[href]"):
            href = attribute(anchor, "href")
            if href == "#":
                continue
            if href.startswith("#"):
                if href[1:] not in ids:
                    broken_anchors.append(href)
            elif is_local_reference(href) and not link_target_exists(document.base_dir, href):
                broken_links.append(href)

        if broken_anchors:
            for href in broken_anchors:
                reporter.record_fail(f"Broken anchor: {href}")
        else:
            reporter.record_pass("All anchor links resolve to existing IDs")

        if broken_links:
            for href in broken_links:
                reporter.record_fail(f"Broken relative link: {href}")
        else:
            reporter.record_pass("All relative links point to existing files")
