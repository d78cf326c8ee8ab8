"""Parsed HTML document backed by BeautifulSoup.

Read-only: check groups query it, nothing mutates the tree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup
from bs4.element import PreformattedString
from soupsieve import SelectorSyntaxError

from sitecheck.domain.exceptions.document import DocumentReadError
from sitecheck.domain.exceptions.extraction import ExtractionError

if TYPE_CHECKING:
    from pathlib import Path

    from bs4 import Tag

logger = logging.getLogger(__name__)

# Elements whose text is never rendered as visible copy
_INVISIBLE = frozenset({"script", "style", "noscript", "template"})


@dataclass(frozen=True, slots=True)
class HtmlDocument:
    """One static HTML artifact.

    Attributes:
        path: Location of the document on disk
        raw: Unparsed document text
        soup: Parsed tree
    """

    path: Path
    raw: str
    soup: BeautifulSoup

    @property
    def base_dir(self) -> Path:
        """Directory local references resolve against."""
        return self.path.parent

    def select(self, selector: str) -> list[Tag]:
        """All elements matching a CSS selector, in document order.

        Raises:
            ExtractionError: If selector is not valid CSS
        """
        try:
            return list(self.soup.select(selector))
        except SelectorSyntaxError as e:
            raise ExtractionError(f"select {selector!r}", str(e)) from e

    def count(self, selector: str) -> int:
        """Number of elements matching selector."""
        return len(self.select(selector))

    def exists(self, selector: str) -> bool:
        """At least one element matches selector."""
        return bool(self.select(selector))

    def attr(self, selector: str, name: str) -> str:
        """Attribute of the first match, '' if element or attribute is absent."""
        matches = self.select(selector)
        if not matches:
            return ""
        return attribute(matches[0], name)

    def text(self, selector: str) -> str:
        """Concatenated text of all matches."""
        return "".join(element.get_text() for element in self.select(selector))

    @property
    def ids(self) -> frozenset[str]:
        """Every id attribute in the document."""
        return frozenset(str(el["id"]) for el in self.soup.find_all(id=True))

    @property
    def script_text(self) -> str:
        """Inline (non-external) script blocks joined by newlines."""
        return "\n".join(
            script.get_text() for script in self.soup.find_all("script") if not script.has_attr("src")
        )

    @property
    def body_text(self) -> str:
        """Visible text of <body>, excluding script and style content."""
        body = self.soup.body
        if body is None:
            return ""
        return _visible_text(body)

    @property
    def footer_text(self) -> str:
        """Visible text of every <footer>."""
        return "".join(_visible_text(footer) for footer in self.soup.find_all("footer"))


def attribute(element: Tag, name: str) -> str:
    """Attribute value as a string, '' when absent."""
    value = element.get(name)
    if value is None:
        return ""
    # multi-valued attributes (class, rel) come back as lists
    return " ".join(value) if isinstance(value, list) else str(value)


def _visible_text(root: Tag) -> str:
    return "".join(
        str(node)
        for node in root.find_all(string=True)
        if not isinstance(node, PreformattedString)
        and not any(parent.name in _INVISIBLE for parent in node.parents if parent is not root)
    )


def parse_document(path: Path, raw: str) -> HtmlDocument:
    """Parse already-loaded text as the document at path."""
    return HtmlDocument(path=path, raw=raw, soup=BeautifulSoup(raw, "html.parser"))


def load_document(path: Path) -> HtmlDocument:
    """Read and parse an HTML document as UTF-8.

    Args:
        path: Document location

    Returns:
        Parsed document

    Raises:
        DocumentReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentReadError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, str(e)) from e

    logger.debug("loaded %s (%d chars)", path, len(raw))
    return parse_document(path, raw)
