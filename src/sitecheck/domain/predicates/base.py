"""Predicate type aliases."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitecheck.domain.model.shape_rule import FactValue

# Type alias for predicate functions over a single fact
FactPredicate = Callable[["FactValue"], bool]
