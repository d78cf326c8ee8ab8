"""Declarative shape rules over extracted facts.

A rule is data: the field it inspects, a predicate, and the message
shown when the predicate rejects the value. A Schema groups rules under
a name and evaluates them as a unit. Every violated rule yields one
violation; evaluation never stops at the first one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitecheck.domain.predicates.base import FactPredicate

type FactValue = str | int | float | bool
type FactSet = Mapping[str, FactValue]


@dataclass(frozen=True, slots=True)
class ShapeRule:
    """Expected property of one extracted fact.

    Attributes:
        field: Fact name the rule inspects
        predicate: Returns True when the value is acceptable
        message: Human-readable expectation, shown on violation
    """

    field: str
    predicate: FactPredicate
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.field:
            raise ValueError("field must not be empty")
        if not callable(self.predicate):
            raise TypeError(f"predicate must be callable, got {type(self.predicate).__name__}")
        if not self.message:
            raise ValueError("message must not be empty")

    def holds(self, facts: FactSet) -> bool:
        """Check rule against fact set. Missing field never holds."""
        if self.field not in facts:
            return False
        return bool(self.predicate(facts[self.field]))


@dataclass(frozen=True, slots=True)
class RuleViolation:
    """One rejected fact.

    Attributes:
        schema: Name of the schema the rule belongs to
        field: Fact name
        message: Rule message
        actual: Offending value, None if the fact was missing
    """

    schema: str
    field: str
    message: str
    actual: FactValue | None

    def __str__(self) -> str:
        """Format as 'field: message (got value)'."""
        got = "missing" if self.actual is None else repr(self.actual)
        return f"{self.field}: {self.message} (got {got})"


@dataclass(frozen=True, slots=True)
class Schema:
    """Named group of shape rules.

    Attributes:
        name: Schema name (e.g. "meta tags")
        rules: Rules in reporting order
    """

    name: str
    rules: tuple[ShapeRule, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.rules:
            raise ValueError(f"schema '{self.name}' must have at least one rule")
        fields = [rule.field for rule in self.rules]
        duplicates = sorted({f for f in fields if fields.count(f) > 1})
        if duplicates:
            raise ValueError(f"schema '{self.name}' has duplicate fields: {', '.join(duplicates)}")

    @property
    def fields(self) -> tuple[str, ...]:
        """Fact names covered by this schema."""
        return tuple(rule.field for rule in self.rules)

    def evaluate(self, facts: FactSet) -> tuple[RuleViolation, ...]:
        """Evaluate every rule against the fact set.

        Args:
            facts: Extracted facts keyed by field name

        Returns:
            One violation per rejected rule, in rule order (empty if valid)
        """
        return tuple(
            RuleViolation(
                schema=self.name,
                field=rule.field,
                message=rule.message,
                actual=facts.get(rule.field),
            )
            for rule in self.rules
            if not rule.holds(facts)
        )
