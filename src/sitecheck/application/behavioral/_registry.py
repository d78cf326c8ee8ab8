"""Behavioral check registry.

Central registry of all check groups with a factory function.
"""

from __future__ import annotations

from sitecheck.application.behavioral._base import BehavioralCheck
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
from sitecheck.application.behavioral.performance_checks import PerformanceCheck

# Registry - tuple for immutability
# Order matters: groups are numbered and reported in this order
_ALL_CHECKS: tuple[type[BehavioralCheck], ...] = (
    PageLoadCheck,
    ResponsiveLayoutCheck,
    LazyImagesCheck,
    LanguageSwitchCheck,
    ChatAnimationCheck,
    InteractiveElementsCheck,
    PerformanceCheck,
)


def default_checks() -> tuple[BehavioralCheck, ...]:
    """Instantiate every behavioral check group in run order."""
    return tuple(check_cls() for check_cls in _ALL_CHECKS)
