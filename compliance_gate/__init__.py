"""
Compliance Gate - accessibility compliance scoring for CI.

Scores accessibility test results against government standards (BITV, RGAA,
EN 301 549, DOS), persists JSON reports and renders HTML summaries. The exit
code of ``compliance-check`` tells CI whether every standard is fully met.
"""

from .core.aggregator import AggregateRun, ComplianceChecker, StandardRun
from .core.config import GateConfig
from .models.report import AggregateReport, ComplianceReport
from .models.standard import STANDARDS, Standard

__version__ = "1.0.0"

__all__ = [
    "AggregateReport",
    "AggregateRun",
    "ComplianceChecker",
    "ComplianceReport",
    "GateConfig",
    "STANDARDS",
    "Standard",
    "StandardRun",
]
