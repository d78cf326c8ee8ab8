"""Feed schema evaluation into a reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitecheck.domain.model.shape_rule import FactSet, Schema
    from sitecheck.domain.ports.reporter import ReporterProtocol


def report_schema(
    reporter: ReporterProtocol,
    schema: Schema,
    facts: FactSet,
    *,
    pass_label: str,
    fail_prefix: str,
) -> int:
    """Evaluate schema and record its outcome.

    One failure per violated rule, labeled '<fail_prefix>: <field>' with
    the expectation and offending value as detail. A single pass when no
    rule is violated.

    Args:
        reporter: Destination for outcomes
        schema: Rules to evaluate
        facts: Extracted facts
        pass_label: Label of the aggregate pass
        fail_prefix: Prefix of each failure label

    Returns:
        Number of violations recorded
    """
    violations = schema.evaluate(facts)
    if not violations:
        reporter.record_pass(pass_label)
        return 0

    for violation in violations:
        got = "missing" if violation.actual is None else repr(violation.actual)
        reporter.record_fail(f"{fail_prefix}: {violation.field}", f"{violation.message} (got {got})")
    return len(violations)
