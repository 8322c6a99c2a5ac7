"""Human-readable renderings of compliance reports."""

from .console import ConsoleReporter
from .html_renderer import render_aggregate_report, render_report, render_standard_report
from .markdown_summary import format_aggregate_summary, format_standard_summary, format_summary

__all__ = [
    "ConsoleReporter",
    "format_aggregate_summary",
    "format_standard_summary",
    "format_summary",
    "render_aggregate_report",
    "render_report",
    "render_standard_report",
]
