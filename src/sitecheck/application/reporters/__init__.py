"""Reporters for check outcomes.

RichReporter prints through a rich Console. Custom reporters subclass
BaseReporter and implement the _emit_* hooks.
"""

from sitecheck.application.reporters._base import BaseReporter, Verdicts
from sitecheck.application.reporters.console import RichReporter

__all__ = [
    "BaseReporter",
    "RichReporter",
    "Verdicts",
]
