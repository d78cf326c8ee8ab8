"""Behavioral prober: runtime checks against a served site.

Groups talk to the BrowserPort/PageProbe protocols only, never to a
browser library directly.
"""

from sitecheck.application.behavioral._base import BehavioralCheck
from sitecheck.application.behavioral._registry import default_checks
from sitecheck.application.behavioral.interaction_checks import (
    ChatAnimationCheck,
    InteractiveElementsCheck,
    LanguageSwitchCheck,
)
from sitecheck.application.behavioral.page_checks import (
    LazyImagesCheck,
    PageLoadCheck,
    ResponsiveLayoutCheck,
)
from sitecheck.application.behavioral.performance_checks import (
    PerformanceCheck,
    classify_load,
    classify_weight,
)
from sitecheck.application.behavioral.prober import PROBER_VERDICTS, BehavioralProber

__all__ = [
    # Base
    "BehavioralCheck",
    # Groups
    "PageLoadCheck",
    "ResponsiveLayoutCheck",
    "LazyImagesCheck",
    "LanguageSwitchCheck",
    "ChatAnimationCheck",
    "InteractiveElementsCheck",
    "PerformanceCheck",
    # Classification
    "classify_load",
    "classify_weight",
    # Runner
    "BehavioralProber",
    "PROBER_VERDICTS",
    "default_checks",
]
