"""Loading per-standard test results from disk."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum

from pydantic import ValidationError

from ..models.test_result import TestResultSet
from .config import GateConfig
from .errors import MissingInputError, ParseError

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    """How loading a standard's results went."""

    LOADED = "loaded"
    MISSING = "missing"
    INVALID = "invalid"

    @property
    def has_data(self) -> bool:
        return self is LoadStatus.LOADED


@dataclass(frozen=True)
class LoadResult:
    """Parsed results, or the reason there are none."""

    standard: str
    status: LoadStatus
    results: TestResultSet | None = None
    reason: str | None = None


def read_results(standard: str, config: GateConfig) -> TestResultSet:
    """Read and validate the runner output for ``standard``.

    Raises:
        MissingInputError: the result file does not exist
        ParseError: the file is not JSON or does not match the runner schema
    """
    path = config.input_path(standard)
    if not path.is_file():
        raise MissingInputError(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(path, str(exc)) from exc

    try:
        return TestResultSet.model_validate(data)
    except ValidationError as exc:
        raise ParseError(path, f"{exc.error_count()} schema error(s): {exc.errors()[0]['msg']}") from exc


def load_results(standard: str, config: GateConfig) -> LoadResult:
    """Load results for ``standard``; input problems degrade to "no data"."""
    try:
        results = read_results(standard, config)
    except MissingInputError as exc:
        logger.warning("No test results found for %s (%s)", standard, exc.path)
        return LoadResult(standard, LoadStatus.MISSING, reason=str(exc))
    except ParseError as exc:
        logger.warning("Failed to parse test results for %s: %s", standard, exc.reason)
        return LoadResult(standard, LoadStatus.INVALID, reason=str(exc))

    logger.debug("Loaded %d assertion(s) for %s", len(results.outcomes), standard)
    return LoadResult(standard, LoadStatus.LOADED, results=results)
