"""Domain model: value objects for checks, rules, targets and configuration."""

from sitecheck.domain.model.check_result import CheckResult
from sitecheck.domain.model.check_stats import CheckStats
from sitecheck.domain.model.configuration import (
    CardLayout,
    ContentMinimum,
    ConversationVariant,
    LanguageExpectation,
    MetaExpectations,
    PageSelectors,
    ProberConfig,
    RequiredSection,
    RequiredText,
    ValidatorConfig,
)
from sitecheck.domain.model.enums import Outcome, RunStatus
from sitecheck.domain.model.page_contract import PageContract
from sitecheck.domain.model.runtime_facts import (
    AnimationState,
    LanguageState,
    LayoutMetrics,
    MockVisibility,
    ResourceWeight,
)
from sitecheck.domain.model.shape_rule import (
    FactSet,
    FactValue,
    RuleViolation,
    Schema,
    ShapeRule,
)
from sitecheck.domain.model.target import PageRoute, Viewport

__all__ = [
    # Checks
    "CheckResult",
    "CheckStats",
    "Outcome",
    "RunStatus",
    # Shape rules
    "FactSet",
    "FactValue",
    "RuleViolation",
    "Schema",
    "ShapeRule",
    # Targets
    "PageRoute",
    "Viewport",
    # Runtime facts
    "AnimationState",
    "LanguageState",
    "LayoutMetrics",
    "MockVisibility",
    "ResourceWeight",
    # Configuration
    "CardLayout",
    "ContentMinimum",
    "ConversationVariant",
    "LanguageExpectation",
    "MetaExpectations",
    "PageContract",
    "PageSelectors",
    "ProberConfig",
    "RequiredSection",
    "RequiredText",
    "ValidatorConfig",
]
