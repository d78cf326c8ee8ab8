"""Domain predicates."""

from sitecheck.domain.predicates.base import FactPredicate
from sitecheck.domain.predicates.fact_predicates import (
    at_least,
    contains,
    equals,
    is_true,
    min_length,
)

__all__ = [
    # Type aliases
    "FactPredicate",
    # Fact predicates
    "equals",
    "contains",
    "min_length",
    "at_least",
    "is_true",
]
