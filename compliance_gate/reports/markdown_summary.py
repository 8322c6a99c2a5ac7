"""Markdown summary of an aggregate report, for pull request comments."""

from ..models.report import AggregateReport, ComplianceReport
from .html_renderer import standard_info


def format_aggregate_summary(report: AggregateReport) -> str:
    """Format the per-standard table posted on pull requests.

    Structure: heading > standards table > overall line
    """
    lines = []

    lines.append("## 🇪🇺 European Accessibility Compliance Report\n")
    lines.append("| Standard | Country | Compliance | Status |")
    lines.append("|----------|---------|------------|--------|")

    for code, score in report.standards.items():
        info = standard_info(code)
        status = "✅" if score == 100 else "❌"
        lines.append(f"| {info.flag} {_cell(code)} | {_cell(info.country)} | {score}% | {status} |")

    lines.append("")
    if report.passed:
        lines.append(f"**Overall compliance: {report.overall_compliance}%** - all European standards met.")
    else:
        lines.append(f"**Overall compliance: {report.overall_compliance}%** - compliance issues detected.")

    return "\n".join(lines) + "\n"


def format_standard_summary(report: ComplianceReport) -> str:
    """Format a single standard's score and failed requirements."""
    info = standard_info(report.standard)
    status = "✅ Compliant" if report.passed else "❌ Non-compliant"

    lines = [
        f"## {info.flag} {report.standard} Compliance Report\n",
        f"**Score:** {report.score}% (threshold {report.threshold}%), {status}\n",
        f"**Tests:** {report.details.total_tests} total, "
        f"{report.details.passed_tests} passed, {report.details.failed_tests} failed\n",
    ]

    if report.details.has_failures:
        lines.append("### Failed Requirements\n")
        for failure in report.details.failures:
            lines.append(f"- **{_cell(failure.requirement)}**: {_cell(failure.title)}")

    return "\n".join(lines) + "\n"


def format_summary(report: ComplianceReport | AggregateReport) -> str:
    if isinstance(report, AggregateReport):
        return format_aggregate_summary(report)
    return format_standard_summary(report)


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")
