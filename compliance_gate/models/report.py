"""Compliance report data models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


Score = Annotated[int, Field(ge=0, le=100)]


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FailureRecord(_ReportModel):
    """A failed assertion as it appears in a report."""

    requirement: str = Field(..., description="Ancestor group titles joined with ' > '")
    title: str
    message: str = Field(default="", description="All failure messages joined with newlines")


class ReportDetails(_ReportModel):
    """Counts and failures behind a score."""

    total_tests: int = Field(default=0, ge=0)
    passed_tests: int = Field(default=0, ge=0)
    failed_tests: int = Field(default=0, ge=0)
    failures: list[FailureRecord] = Field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return len(self.failures) > 0


class ComplianceReport(_ReportModel):
    """Computed compliance of one standard."""

    standard: str
    score: Score
    threshold: int = Field(..., ge=0, le=100)
    timestamp: str = Field(..., description="ISO-8601 time of computation")
    details: ReportDetails = Field(default_factory=ReportDetails)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return self.score >= self.threshold

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


class AggregateReport(_ReportModel):
    """Cross-standard summary of one run."""

    timestamp: str
    standards: dict[str, Score] = Field(default_factory=dict, description="Score per standard code")

    @computed_field(alias="overallCompliance")  # type: ignore[prop-decorator]
    @property
    def overall_compliance(self) -> int:
        """The weakest standard gates the whole run."""
        if not self.standards:
            return 0
        return min(self.standards.values())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return self.overall_compliance == 100

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


class Badge(_ReportModel):
    """shields.io endpoint payload for the aggregate score."""

    schema_version: int = 1
    label: str
    message: str
    color: str

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
