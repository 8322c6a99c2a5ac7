"""Schema of the test-runner output consumed by the gate."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

OutcomeStatus = Literal["passed", "failed", "pending", "skipped", "todo", "disabled", "focused"]


class _RunnerModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")


class AssertionOutcome(_RunnerModel):
    """One accessibility assertion reported by the test runner."""

    status: OutcomeStatus
    title: str
    ancestor_titles: list[str] = Field(default_factory=list)
    failure_messages: list[str] = Field(default_factory=list)

    @property
    def requirement(self) -> str:
        """The requirement this assertion maps to, rebuilt from its groups."""
        return " > ".join(self.ancestor_titles)


class SuiteResult(_RunnerModel):
    """A top-level test file/suite in the runner output."""

    assertion_results: list[AssertionOutcome] = Field(default_factory=list)


class TestResultSet(_RunnerModel):
    """Runner output for one standard."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    test_results: list[SuiteResult]

    @property
    def outcomes(self) -> list[AssertionOutcome]:
        """Assertions of the first suite; one suite per standard file is expected."""
        if not self.test_results:
            return []
        return self.test_results[0].assertion_results

    def get_passed(self) -> list[AssertionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == "passed"]

    def get_failed(self) -> list[AssertionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == "failed"]
