"""Tests for the per-standard pipeline and the aggregate run."""

import json

import pytest

from compliance_gate.core.aggregator import ComplianceChecker, check_all, check_standard
from compliance_gate.core.errors import WriteError
from compliance_gate.core.loader import LoadStatus

from ..conftest import make_runner_output


@pytest.fixture
def checker(config, clock):
    return ComplianceChecker(config, clock)


def test_scenario_a_full_compliance(checker, write_input, tmp_path):
    write_input("BITV", make_runner_output(passed=10))

    run = checker.check_standard("BITV")

    assert run.score == 100
    assert run.passed is True
    assert run.load_status is LoadStatus.LOADED
    assert run.report_path == tmp_path / "compliance-report-BITV.json"


def test_scenario_b_partial_compliance(checker, write_input, scenario_b_output):
    write_input("RGAA", scenario_b_output)

    run = checker.check_standard("RGAA")

    assert run.score == 70
    assert run.passed is False
    persisted = json.loads(run.report_path.read_text(encoding="utf-8"))
    assert [failure["requirement"] for failure in persisted["details"]["failures"]] == [
        "RGAA 1 > Images > Alt text",
        "RGAA 3 > Colors",
        "",
    ]


def test_scenario_c_missing_input_still_persists(checker, tmp_path):
    run = checker.check_standard("RGAA")

    assert run.score == 0
    assert run.passed is False
    assert run.load_status is LoadStatus.MISSING
    assert json.loads((tmp_path / "compliance-report-RGAA.json").read_text())["score"] == 0


def test_scenario_e_malformed_input_behaves_like_missing(checker, write_input, tmp_path):
    write_input("RGAA", "this is not json")

    run = checker.check_standard("RGAA")

    assert run.score == 0
    assert run.passed is False
    assert run.load_status is LoadStatus.INVALID
    assert (tmp_path / "compliance-report-RGAA.json").exists()


def test_scenario_d_weakest_standard_gates(checker, write_input, tmp_path):
    write_input("BITV", make_runner_output(passed=10))
    write_input("RGAA", make_runner_output(passed=10))
    write_input("EN301549", make_runner_output(passed=9, failed=1))
    write_input("DOS", make_runner_output(passed=10))

    run = checker.check_all()

    assert run.overall_compliance == 90
    assert run.passed is False
    assert [standard_run.standard for standard_run in run.runs] == ["BITV", "RGAA", "EN301549", "DOS"]
    persisted = json.loads((tmp_path / "compliance-report-aggregate.json").read_text())
    assert persisted["standards"] == {"BITV": 100, "RGAA": 100, "EN301549": 90, "DOS": 100}
    assert persisted["overallCompliance"] == 90
    assert persisted["passed"] is False
    for code in ("BITV", "RGAA", "EN301549", "DOS"):
        assert (tmp_path / f"compliance-report-{code}.json").exists()


def test_all_standards_compliant_with_badge(checker, write_input, tmp_path):
    for code in ("BITV", "RGAA", "EN301549", "DOS"):
        write_input(code, make_runner_output(passed=5))

    run = checker.check_all(badge=True)

    assert run.overall_compliance == 100
    assert run.passed is True
    assert run.badge_path == tmp_path / "compliance-badge.json"
    badge = json.loads(run.badge_path.read_text())
    assert badge == {"schemaVersion": 1, "label": "EU Compliance", "message": "100%", "color": "success"}


def test_no_badge_by_default(checker, tmp_path):
    run = checker.check_all()
    assert run.badge_path is None
    assert not (tmp_path / "compliance-badge.json").exists()


def test_overall_is_minimum_of_this_run(checker, write_input):
    for code in ("BITV", "RGAA", "EN301549", "DOS"):
        write_input(code, make_runner_output(passed=1, failed=1))
    assert checker.check_all().overall_compliance == 50

    for code in ("BITV", "RGAA", "EN301549", "DOS"):
        write_input(code, make_runner_output(passed=3, failed=1))
    assert checker.check_all().overall_compliance == 75


def test_rerun_is_identical_except_timestamp(config, write_input, scenario_b_output):
    write_input("RGAA", scenario_b_output)

    first = check_standard("RGAA", config).report.model_dump(by_alias=True)
    second = check_standard("RGAA", config).report.model_dump(by_alias=True)

    first.pop("timestamp")
    second.pop("timestamp")
    assert first == second


def test_write_failure_aborts(checker, tmp_path):
    (tmp_path / "compliance-report-BITV.json").mkdir()

    with pytest.raises(WriteError):
        checker.check_all()

    assert not (tmp_path / "compliance-report-aggregate.json").exists()


def test_module_level_check_all(config, write_input):
    write_input("DOS", make_runner_output(passed=4))

    run = check_all(config)

    assert run.report.standards["DOS"] == 100
    assert run.overall_compliance == 0
