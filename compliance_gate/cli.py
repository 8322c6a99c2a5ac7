"""Command-line interface for Compliance Gate."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .core.aggregator import ComplianceChecker
from .core.config import ALL_STANDARDS, GateConfig
from .core.errors import RenderError
from .core.persister import read_report, write_text
from .models.report import AggregateReport, ComplianceReport
from .reports.console import ConsoleReporter
from .reports.html_renderer import render_aggregate_report, render_standard_report, standard_info
from .reports.markdown_summary import format_summary

logger = logging.getLogger(__name__)

ERROR_PREFIX = "❌ Unexpected error:"


def configure_logging(verbose: bool = False) -> None:
    """Route package logs to stderr through Rich."""
    package_logger = logging.getLogger("compliance_gate")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def load_config(config_path: Optional[Path], working_dir: Optional[Path]) -> GateConfig:
    load_dotenv(Path.cwd() / ".env")
    if config_path:
        return GateConfig.from_file(config_path, working_dir=working_dir)
    if working_dir:
        return GateConfig(working_dir=working_dir)
    return GateConfig()


def report_failure(exc: Exception, verbose: bool) -> None:
    if verbose:
        logger.exception("%s %s", ERROR_PREFIX, exc)
    else:
        logger.error("%s %s", ERROR_PREFIX, exc)


standard_option = click.option(
    "--standard",
    default=ALL_STANDARDS,
    show_default=True,
    help="Standard code (BITV, RGAA, EN301549, DOS) or ALL",
)
working_dir_option = click.option(
    "--working-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding test results and reports (default: current directory)",
)
config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
    help="Path to YAML or JSON configuration file",
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")


@click.command("check")
@standard_option
@working_dir_option
@config_option
@click.option("--badge", is_flag=True, help="Also write a shields.io badge file (only with --standard=ALL)")
@verbose_option
@click.pass_context
def check(
    ctx: click.Context,
    standard: str,
    working_dir: Optional[Path],
    config_path: Optional[Path],
    badge: bool,
    verbose: bool,
) -> None:
    """
    Score accessibility test results against government standards.

    Prints the score (or the overall compliance in ALL mode) as a bare
    number and exits 0 only at 100% compliance.

    \b
    # All standards
    compliance-check
    \b
    # One standard
    compliance-check --standard=RGAA
    """
    configure_logging(verbose)
    reporter = ConsoleReporter(Console(stderr=True))

    try:
        checker = ComplianceChecker(load_config(config_path, working_dir))
        if standard == ALL_STANDARDS:
            aggregate = checker.check_all(badge=badge)
            reporter.aggregate(aggregate)
            score = aggregate.overall_compliance
        else:
            if badge:
                logger.warning("--badge only applies to --standard=ALL; no badge written")
            run = checker.check_standard(standard)
            reporter.standard(run)
            score = run.score
    except Exception as exc:
        report_failure(exc, verbose)
        ctx.exit(1)

    click.echo(score)
    ctx.exit(0 if score == 100 else 1)


@click.command("render")
@standard_option
@click.option(
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Persisted report (default: compliance-report-<STANDARD>.json, or the aggregate for ALL)",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the rendered report (default: report-<STANDARD>.html)",
)
@click.option(
    "--format",
    "output_format",
    default="html",
    show_default=True,
    type=click.Choice(["html", "markdown"]),
    help="Output format",
)
@working_dir_option
@config_option
@verbose_option
@click.pass_context
def render(
    ctx: click.Context,
    standard: str,
    input_path: Optional[Path],
    output_path: Optional[Path],
    output_format: str,
    working_dir: Optional[Path],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Render a persisted compliance report as HTML or markdown."""
    configure_logging(verbose)
    console = Console(stderr=True)

    try:
        config = load_config(config_path, working_dir)
        input_path = input_path or config.persisted_report_path(standard)
        output_path = output_path or config.rendered_path(standard, output_format)

        report = read_report(input_path)
        if isinstance(report, ComplianceReport) and standard not in (ALL_STANDARDS, report.standard):
            raise RenderError(input_path, f"report is for {report.standard}, not {standard}")

        if output_format == "markdown":
            content = format_summary(report)
        elif isinstance(report, AggregateReport):
            content = render_aggregate_report(report)
        else:
            content = render_standard_report(report, standard_info(report.standard))

        write_text(content, output_path)
    except Exception as exc:
        report_failure(exc, verbose)
        ctx.exit(1)

    console.print(f"✅ Report generated: {output_path}")


@click.group()
@click.version_option(__version__, prog_name="compliance-gate")
def main() -> None:
    """Compliance Gate - European accessibility compliance for CI."""


main.add_command(check)
main.add_command(render)


if __name__ == "__main__":
    main()
