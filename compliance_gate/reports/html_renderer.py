"""HTML renderer for persisted compliance reports."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..models.report import AggregateReport, ComplianceReport
from ..models.standard import STANDARDS, Standard

TEMPLATE_DIR = Path(__file__).parent / "templates"


def score_tier(score: int) -> str:
    """CSS class for a score; display policy only, not a compliance rule."""
    if score == 100:
        return "score-100"
    if score >= 80:
        return "score-partial"
    return "score-fail"


def standard_info(code: str) -> Standard:
    """Registry metadata, or a plain placeholder for unregistered codes."""
    info = STANDARDS.get(code)
    if info is not None:
        return info
    return Standard(code=code, full_name=code, country="Unknown")


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["score_tier"] = score_tier
    return env


def render_standard_report(
    report: ComplianceReport,
    info: Standard | None = None,
    generated_at: datetime | None = None,
) -> str:
    info = info or standard_info(report.standard)
    template = _environment().get_template("standard_report.html")
    return template.render(
        report=report,
        info=info,
        generated_at=_display_time(generated_at),
    )


def render_aggregate_report(report: AggregateReport, generated_at: datetime | None = None) -> str:
    cards = [(code, standard_info(code), score) for code, score in report.standards.items()]
    template = _environment().get_template("aggregate_report.html")
    return template.render(
        report=report,
        cards=cards,
        generated_at=_display_time(generated_at),
    )


def render_report(report: ComplianceReport | AggregateReport, generated_at: datetime | None = None) -> str:
    if isinstance(report, AggregateReport):
        return render_aggregate_report(report, generated_at)
    return render_standard_report(report, generated_at=generated_at)


def _display_time(moment: datetime | None) -> str:
    moment = moment or datetime.now().astimezone()
    return moment.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
