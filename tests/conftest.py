"""Shared fixtures for compliance gate tests."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from compliance_gate.core.config import GateConfig

FIXED_TIME = datetime(2024, 5, 1, 9, 30, 0, tzinfo=timezone.utc)


def make_runner_output(passed: int = 0, failed: int = 0, ancestors=("Keyboard", "Focus")) -> dict:
    """Build jest-style runner output with ``passed`` and ``failed`` assertions."""
    assertions = [
        {
            "status": "passed",
            "title": f"passes check {idx}",
            "ancestorTitles": list(ancestors),
            "failureMessages": [],
        }
        for idx in range(passed)
    ]
    assertions += [
        {
            "status": "failed",
            "title": f"fails check {idx}",
            "ancestorTitles": list(ancestors),
            "failureMessages": [f"Expected contrast 4.5:1 for element {idx}"],
        }
        for idx in range(failed)
    ]
    return {"numTotalTests": passed + failed, "testResults": [{"assertionResults": assertions}]}


@pytest.fixture
def config(tmp_path: Path) -> GateConfig:
    return GateConfig(working_dir=tmp_path)


@pytest.fixture
def clock():
    return lambda: FIXED_TIME


@pytest.fixture
def write_input(tmp_path: Path):
    """Write runner output for a standard into the working directory."""

    def _write(standard: str, data) -> Path:
        path = tmp_path / f"compliance-{standard}.json"
        content = data if isinstance(data, str) else json.dumps(data)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_b_output() -> dict:
    """Ten assertions, seven passed, failures X, Y and Z."""
    data = make_runner_output(passed=7)
    data["testResults"][0]["assertionResults"] += [
        {
            "status": "failed",
            "title": "X",
            "ancestorTitles": ["RGAA 1", "Images", "Alt text"],
            "failureMessages": ["Image has no alt attribute", "at Image.tsx:12"],
        },
        {
            "status": "failed",
            "title": "Y",
            "ancestorTitles": ["RGAA 3", "Colors"],
            "failureMessages": ["Information conveyed by color alone"],
        },
        {
            "status": "failed",
            "title": "Z",
            "ancestorTitles": [],
            "failureMessages": ["<script>alert('x')</script>"],
        },
    ]
    return data
