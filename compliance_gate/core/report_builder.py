"""Building compliance reports from scores and test results."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone

from ..models.report import AggregateReport, Badge, ComplianceReport, FailureRecord, ReportDetails
from ..models.standard import threshold_for
from ..models.test_result import AssertionOutcome, TestResultSet
from .scoring import count_outcomes


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. ``2024-05-01T09:30:00.000Z``."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def failure_record(outcome: AssertionOutcome) -> FailureRecord:
    return FailureRecord(
        requirement=outcome.requirement,
        title=outcome.title,
        message="\n".join(outcome.failure_messages),
    )


def build_details(results: TestResultSet | None) -> ReportDetails:
    if results is None:
        return ReportDetails()

    counts = count_outcomes(results)
    return ReportDetails(
        total_tests=counts.total,
        passed_tests=counts.passed,
        failed_tests=counts.failed,
        failures=[failure_record(outcome) for outcome in results.get_failed()],
    )


def build_report(
    standard: str,
    score: int,
    results: TestResultSet | None,
    timestamp: datetime | None = None,
) -> ComplianceReport:
    """Combine a score, the standard's threshold and failure details."""
    return ComplianceReport(
        standard=standard,
        score=score,
        threshold=threshold_for(standard),
        timestamp=iso_timestamp(timestamp),
        details=build_details(results),
    )


def build_aggregate(scores: Mapping[str, int], timestamp: datetime | None = None) -> AggregateReport:
    return AggregateReport(timestamp=iso_timestamp(timestamp), standards=dict(scores))


def badge_color(score: int) -> str:
    if score == 100:
        return "success"
    if score >= 80:
        return "yellow"
    return "critical"


def build_badge(report: AggregateReport, label: str = "EU Compliance") -> Badge:
    score = report.overall_compliance
    return Badge(label=label, message=f"{score}%", color=badge_color(score))
