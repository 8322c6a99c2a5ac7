"""Configuration management for the compliance gate."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ALL_STANDARDS = "ALL"


class GateConfig(BaseSettings):
    """Where the gate reads test results and writes reports.

    Loads from environment variables automatically, e.g.
    ``COMPLIANCE_GATE_WORKING_DIR`` or ``COMPLIANCE_GATE_BADGE_LABEL``.
    File name templates take a ``{standard}`` placeholder.
    """

    working_dir: Path = Field(default=Path("."), description="Directory holding inputs and reports")
    input_template: str = Field(default="compliance-{standard}.json", description="Test-runner output per standard")
    report_template: str = Field(
        default="compliance-report-{standard}.json", description="Persisted report per standard"
    )
    aggregate_report: str = Field(default="compliance-report-aggregate.json", description="Persisted aggregate")
    html_template: str = Field(default="report-{standard}.html", description="Rendered HTML report")
    markdown_template: str = Field(default="report-{standard}.md", description="Rendered markdown summary")
    badge_file: str = Field(default="compliance-badge.json", description="shields.io endpoint file")
    badge_label: str = Field(default="EU Compliance", description="Label shown on the badge")

    model_config = SettingsConfigDict(
        env_prefix="COMPLIANCE_GATE_",
        extra="forbid",
    )

    @classmethod
    def from_file(cls, config_path: str | Path, **overrides: Any) -> GateConfig:
        """Load configuration from a YAML or JSON file."""
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in [".yaml", ".yml"]:
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)

        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)

    def input_path(self, standard: str) -> Path:
        return self.working_dir / self.input_template.format(standard=standard)

    def report_path(self, standard: str) -> Path:
        return self.working_dir / self.report_template.format(standard=standard)

    def aggregate_report_path(self) -> Path:
        return self.working_dir / self.aggregate_report

    def badge_path(self) -> Path:
        return self.working_dir / self.badge_file

    def rendered_path(self, standard: str, output_format: str = "html") -> Path:
        template = self.markdown_template if output_format == "markdown" else self.html_template
        return self.working_dir / template.format(standard=standard)

    def persisted_report_path(self, standard: str) -> Path:
        """Report the renderer reads for ``standard`` (the aggregate for ALL)."""
        if standard == ALL_STANDARDS:
            return self.aggregate_report_path()
        return self.report_path(standard)
