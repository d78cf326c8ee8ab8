"""Tests for domain/model/shape_rule.py."""

import pytest

from sitecheck.domain.model.shape_rule import RuleViolation, Schema, ShapeRule
from sitecheck.domain.predicates import at_least, equals, min_length


class TestShapeRule:
    """Tests for ShapeRule."""

    def test_holds_when_predicate_accepts(self) -> None:
        """Rule holds when predicate accepts the fact value."""
        rule = ShapeRule("lang", equals("pt-BR"), "Expected 'pt-BR'")
        assert rule.holds({"lang": "pt-BR"}) is True

    def test_rejects_when_predicate_rejects(self) -> None:
        """Rule does not hold for a rejected value."""
        rule = ShapeRule("lang", equals("pt-BR"), "Expected 'pt-BR'")
        assert rule.holds({"lang": "en"}) is False

    def test_missing_field_never_holds(self) -> None:
        """Missing fact fails even for a permissive predicate."""
        rule = ShapeRule("title", min_length(0), "Expected a title")
        assert rule.holds({}) is False

    def test_empty_field_raises(self) -> None:
        """Empty field name raises ValueError."""
        with pytest.raises(ValueError, match="field"):
            ShapeRule("", equals("x"), "msg")

    def test_non_callable_predicate_raises(self) -> None:
        """Non-callable predicate raises TypeError."""
        with pytest.raises(TypeError, match="callable"):
            ShapeRule("lang", "pt-BR", "msg")  # type: ignore[arg-type]

    def test_empty_message_raises(self) -> None:
        """Empty message raises ValueError."""
        with pytest.raises(ValueError, match="message"):
            ShapeRule("lang", equals("pt-BR"), "")


class TestSchema:
    """Tests for Schema."""

    def _schema(self) -> Schema:
        return Schema(
            name="meta tags",
            rules=(
                ShapeRule("charset", equals("UTF-8"), "Expected 'UTF-8'"),
                ShapeRule("title", min_length(10), "Expected at least 10 characters"),
                ShapeRule("lang", equals("pt-BR"), "Expected 'pt-BR'"),
            ),
        )

    def test_valid_facts_have_no_violations(self) -> None:
        """All rules holding yields an empty tuple."""
        facts = {"charset": "UTF-8", "title": "Zen landing page", "lang": "pt-BR"}
        assert self._schema().evaluate(facts) == ()

    def test_every_violation_reported_in_rule_order(self) -> None:
        """Evaluation does not stop at the first violation."""
        facts = {"charset": "latin-1", "title": "Zen", "lang": "pt-BR"}

        violations = self._schema().evaluate(facts)

        assert [v.field for v in violations] == ["charset", "title"]
        assert violations[0].actual == "latin-1"
        assert violations[0].schema == "meta tags"

    def test_missing_fact_is_violation_with_none_actual(self) -> None:
        """A missing fact is reported with actual None."""
        violations = self._schema().evaluate({"charset": "UTF-8", "title": "Zen landing page"})

        assert len(violations) == 1
        assert violations[0].field == "lang"
        assert violations[0].actual is None

    def test_fields_in_rule_order(self) -> None:
        """fields lists rule fields in order."""
        assert self._schema().fields == ("charset", "title", "lang")

    def test_empty_rules_raise(self) -> None:
        """Schema without rules raises ValueError."""
        with pytest.raises(ValueError, match="at least one rule"):
            Schema(name="empty", rules=())

    def test_duplicate_fields_raise(self) -> None:
        """Two rules on the same field raise ValueError."""
        with pytest.raises(ValueError, match="duplicate fields: forms"):
            Schema(
                name="content",
                rules=(
                    ShapeRule("forms", at_least(2), "two forms"),
                    ShapeRule("forms", at_least(1), "one form"),
                ),
            )


class TestRuleViolation:
    """Tests for RuleViolation formatting."""

    def test_str_with_value(self) -> None:
        """Value is shown via repr."""
        violation = RuleViolation("meta tags", "lang", "Expected 'pt-BR'", "en")
        assert str(violation) == "lang: Expected 'pt-BR' (got 'en')"

    def test_str_missing(self) -> None:
        """Missing value is shown as 'missing'."""
        violation = RuleViolation("meta tags", "lang", "Expected 'pt-BR'", None)
        assert str(violation) == "lang: Expected 'pt-BR' (got missing)"
