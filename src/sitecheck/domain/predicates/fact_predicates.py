"""Fact predicates.

Each factory returns a predicate over one scalar fact. Predicates never
raise on a value of the wrong type; they reject it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitecheck.domain.predicates.base import FactPredicate

if TYPE_CHECKING:
    from sitecheck.domain.model.shape_rule import FactValue


def equals(expected: FactValue) -> FactPredicate:
    """Create predicate: value equals expected exactly.

    Args:
        expected: Required value

    Returns:
        Predicate function
    """

    def predicate(value: FactValue) -> bool:
        return type(value) is type(expected) and value == expected

    return predicate


def contains(substring: str) -> FactPredicate:
    """Create predicate: string value contains substring.

    Args:
        substring: Required substring

    Returns:
        Predicate function

    Raises:
        ValueError: If substring is empty
    """
    if not substring:
        raise ValueError("substring must not be empty")

    def predicate(value: FactValue) -> bool:
        return isinstance(value, str) and substring in value

    return predicate


def min_length(minimum: int) -> FactPredicate:
    """Create predicate: string value has at least minimum characters.

    Args:
        minimum: Minimum length (>= 0)

    Returns:
        Predicate function

    Raises:
        ValueError: If minimum is negative
    """
    if minimum < 0:
        raise ValueError(f"minimum must be >= 0, got {minimum}")

    def predicate(value: FactValue) -> bool:
        return isinstance(value, str) and len(value) >= minimum

    return predicate


def at_least(minimum: int | float) -> FactPredicate:
    """Create predicate: numeric value is >= minimum.

    Booleans are rejected even though bool subclasses int.

    Args:
        minimum: Lower bound (inclusive)

    Returns:
        Predicate function
    """

    def predicate(value: FactValue) -> bool:
        return isinstance(value, int | float) and not isinstance(value, bool) and value >= minimum

    return predicate


def is_true() -> FactPredicate:
    """Create predicate: value is the boolean True (presence facts).

    Returns:
        Predicate function
    """

    def predicate(value: FactValue) -> bool:
        return value is True

    return predicate
