"""Writing reports to disk and reading them back."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..models.report import AggregateReport, Badge, ComplianceReport
from .config import GateConfig
from .errors import RenderError, WriteError

logger = logging.getLogger(__name__)


def write_text(content: str, path: Path) -> Path:
    """Write ``content`` to ``path``, replacing any existing file.

    Raises:
        WriteError: the file could not be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise WriteError(path, exc.strerror or str(exc)) from exc
    return path


def write_report(report: ComplianceReport | AggregateReport | Badge, path: Path) -> Path:
    write_text(report.to_json() + "\n", path)
    logger.debug("Wrote %s", path)
    return path


def write_compliance_report(report: ComplianceReport, config: GateConfig) -> Path:
    return write_report(report, config.report_path(report.standard))


def write_aggregate_report(report: AggregateReport, config: GateConfig) -> Path:
    return write_report(report, config.aggregate_report_path())


def write_badge(badge: Badge, config: GateConfig) -> Path:
    return write_report(badge, config.badge_path())


def read_report(path: Path) -> ComplianceReport | AggregateReport:
    """Load a persisted report of either kind.

    An object with a ``standards`` mapping is an aggregate report; anything
    else must be a single-standard report.

    Raises:
        RenderError: the file is missing, not JSON, or not a report
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise RenderError(path, exc.strerror or str(exc)) from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RenderError(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise RenderError(path, "expected a JSON object")

    model = AggregateReport if isinstance(data.get("standards"), dict) else ComplianceReport
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RenderError(path, f"not a {model.__name__}: {exc.errors()[0]['msg']}") from exc
