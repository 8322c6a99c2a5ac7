"""Per-standard pipeline and the cross-standard aggregate."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from ..models.report import AggregateReport, ComplianceReport
from ..models.standard import STANDARDS
from .config import GateConfig
from .loader import LoadStatus, load_results
from .persister import write_aggregate_report, write_badge, write_compliance_report
from .report_builder import build_aggregate, build_badge, build_report
from .scoring import calculate_score

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class StandardRun:
    """Outcome of checking one standard."""

    standard: str
    report: ComplianceReport
    report_path: Path
    load_status: LoadStatus

    @property
    def score(self) -> int:
        return self.report.score

    @property
    def passed(self) -> bool:
        return self.report.passed


@dataclass(frozen=True)
class AggregateRun:
    """Outcome of checking every configured standard."""

    report: AggregateReport
    report_path: Path
    runs: list[StandardRun] = field(default_factory=list)
    badge_path: Path | None = None

    @property
    def overall_compliance(self) -> int:
        return self.report.overall_compliance

    @property
    def passed(self) -> bool:
        return self.report.passed


class ComplianceChecker:
    """Runs the scoring pipeline against one working directory."""

    def __init__(self, config: GateConfig | None = None, clock: Clock = utc_now) -> None:
        self.config = config or GateConfig()
        self.clock = clock

    def check_standard(self, standard: str) -> StandardRun:
        """Load, score, build and persist the report for ``standard``."""
        logger.info("Checking %s compliance...", standard)
        loaded = load_results(standard, self.config)
        score = calculate_score(loaded.results)
        report = build_report(standard, score, loaded.results, timestamp=self.clock())
        report_path = write_compliance_report(report, self.config)
        return StandardRun(standard=standard, report=report, report_path=report_path, load_status=loaded.status)

    def check_all(self, standards: Iterable[str] | None = None, badge: bool = False) -> AggregateRun:
        """Check every standard in order; the weakest score is the overall compliance."""
        codes = list(STANDARDS) if standards is None else list(standards)
        runs = [self.check_standard(code) for code in codes]

        aggregate = build_aggregate({run.standard: run.score for run in runs}, timestamp=self.clock())
        report_path = write_aggregate_report(aggregate, self.config)
        logger.info("Overall compliance: %d%%", aggregate.overall_compliance)

        badge_path = None
        if badge:
            badge_path = write_badge(build_badge(aggregate, self.config.badge_label), self.config)

        return AggregateRun(report=aggregate, report_path=report_path, runs=runs, badge_path=badge_path)


def check_standard(standard: str, config: GateConfig | None = None, clock: Clock = utc_now) -> StandardRun:
    return ComplianceChecker(config, clock).check_standard(standard)


def check_all(config: GateConfig | None = None, clock: Clock = utc_now, badge: bool = False) -> AggregateRun:
    return ComplianceChecker(config, clock).check_all(badge=badge)
