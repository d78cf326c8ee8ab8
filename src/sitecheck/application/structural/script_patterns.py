"""Textual probes of inline script source.

Scripts are never executed; every question is answered with a regular
expression over the joined inline script text.
"""

from __future__ import annotations

import re

from sitecheck.domain.exceptions.extraction import ExtractionError


def declares_function(script: str, name: str) -> bool:
    """A `function name(` declaration is present."""
    return re.search(rf"function\s+{re.escape(name)}\s*\(", script) is not None


def reads_storage_key(script: str, key: str) -> bool:
    """localStorage.getItem is called with the literal key."""
    pattern = rf"localStorage\.getItem\(\s*(['\"]){re.escape(key)}\1\s*\)"
    return re.search(pattern, script) is not None


def initializes(script: str, variable: str, value: str) -> bool:
    """Variable is declared with the literal string value."""
    pattern = rf"\b(?:let|var|const)\s+{re.escape(variable)}\s*=\s*(['\"]){re.escape(value)}\1"
    return re.search(pattern, script) is not None


def array_literal(script: str, variable: str) -> str | None:
    """Body of the array literal assigned to variable, None if absent.

    The literal is taken to end at the first `];` closing a line.
    """
    pattern = rf"\b(?:const|var|let)\s+{re.escape(variable)}\s*=\s*\[(.*?)\];[ \t]*(?:\n|$)"
    match = re.search(pattern, script, re.DOTALL)
    return match.group(1) if match else None


def count_markers(body: str, marker: str) -> int:
    """Occurrences of marker regex in body.

    Raises:
        ExtractionError: If marker is not a valid regular expression
    """
    try:
        compiled = re.compile(marker)
    except re.error as e:
        raise ExtractionError(f"compile marker {marker!r}", str(e)) from e
    return len(compiled.findall(body))
