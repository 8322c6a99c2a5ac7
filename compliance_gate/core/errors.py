"""Error taxonomy of the compliance gate."""

from __future__ import annotations

from pathlib import Path


class ComplianceGateError(Exception):
    """Base class for all compliance gate errors."""


class MissingInputError(ComplianceGateError):
    """Test-result file for a standard does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No test results found at {path}")


class ParseError(ComplianceGateError):
    """Test-result file is not valid JSON or does not match the runner schema."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse test results {path}: {reason}")


class WriteError(ComplianceGateError):
    """A report or rendered document could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


class UnknownStandardError(ComplianceGateError, KeyError):
    """Standard code is not in the registry."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unknown standard: {code}")

    def __str__(self) -> str:
        return str(self.args[0])


class RenderError(ComplianceGateError):
    """A persisted report could not be loaded for rendering."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load compliance data from {path}: {reason}")
