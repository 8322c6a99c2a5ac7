"""Data models for compliance gate runs."""

from .report import AggregateReport, Badge, ComplianceReport, FailureRecord, ReportDetails
from .standard import STANDARDS, Standard, get_standard, threshold_for
from .test_result import AssertionOutcome, SuiteResult, TestResultSet

__all__ = [
    "AggregateReport",
    "AssertionOutcome",
    "Badge",
    "ComplianceReport",
    "FailureRecord",
    "ReportDetails",
    "STANDARDS",
    "Standard",
    "SuiteResult",
    "TestResultSet",
    "get_standard",
    "threshold_for",
]
