"""Resolution of document-relative references against the filesystem."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

# scheme: (http:, mailto:, tel:, data:, javascript:) or protocol-relative //
_NON_LOCAL = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:|//)")


def is_local_reference(ref: str) -> bool:
    """Reference points into the site itself (no scheme, not a bare anchor).

    Args:
        ref: Raw src/href/url() value

    Returns:
        True for relative and root-relative paths
    """
    ref = ref.strip()
    if not ref or ref.startswith("#"):
        return False
    return _NON_LOCAL.match(ref) is None


def resolve_reference(base_dir: Path, ref: str) -> Path:
    """Map a local reference onto a path under base_dir.

    Query strings and fragments are dropped. A leading '/' means the
    document directory, which is the site root.
    """
    path = re.split(r"[?#]", ref.strip(), maxsplit=1)[0]
    return base_dir / path.lstrip("/")


def reference_exists(base_dir: Path, ref: str) -> bool:
    """Local file exists for an asset reference."""
    return resolve_reference(base_dir, ref).exists()


def link_target_exists(base_dir: Path, href: str) -> bool:
    """Link resolves to an existing file or directory."""
    return resolve_reference(base_dir, href).exists()
