"""Compliance score calculation."""

from __future__ import annotations

from typing import NamedTuple

from ..models.test_result import TestResultSet


class OutcomeCounts(NamedTuple):
    total: int
    passed: int
    failed: int


def count_outcomes(results: TestResultSet | None) -> OutcomeCounts:
    """Count assertions of the first suite; ``failed`` counts only failures, not skips."""
    if results is None:
        return OutcomeCounts(0, 0, 0)
    outcomes = results.outcomes
    return OutcomeCounts(
        total=len(outcomes),
        passed=len(results.get_passed()),
        failed=len(results.get_failed()),
    )


def percentage(passed: int, total: int) -> int:
    """``passed / total`` as a whole percentage, rounding halves up.

    Integer arithmetic keeps x.5 boundaries exact.
    """
    if total <= 0:
        return 0
    return (200 * passed + total) // (2 * total)


def calculate_score(results: TestResultSet | None) -> int:
    """Percentage of passed assertions; no data or no assertions scores 0."""
    counts = count_outcomes(results)
    return percentage(counts.passed, counts.total)
