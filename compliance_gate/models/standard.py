"""Government accessibility standards the gate scores against."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import UnknownStandardError

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 100


class Standard(BaseModel):
    """A fixed accessibility regime with its threshold and display metadata."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Short identifier, e.g. 'BITV'")
    threshold: int = Field(default=DEFAULT_THRESHOLD, ge=0, le=100, description="Required score in percent")
    full_name: str = Field(..., description="Official name of the regulation")
    country: str = Field(..., description="Jurisdiction the standard applies to")
    flag: str = Field(default="", description="Flag emoji shown in reports")
    color: str = Field(default="#0066CC", description="Primary color for rendered reports")
    requirements: tuple[str, ...] = Field(default=(), description="Headline requirements of the standard")


def _registry(*standards: Standard) -> Mapping[str, Standard]:
    return MappingProxyType({standard.code: standard for standard in standards})


STANDARDS: Mapping[str, Standard] = _registry(
    Standard(
        code="BITV",
        full_name="Barrierefreie-Informationstechnik-Verordnung 2.0",
        country="Germany",
        flag="🇩🇪",
        color="#000000",
        requirements=(
            "All functionality available from keyboard",
            "Contrast ratio of at least 4.5:1",
            "Focus indicator clearly visible",
            "German language support",
        ),
    ),
    Standard(
        code="RGAA",
        full_name="Référentiel Général d'Amélioration de l'Accessibilité 4.1",
        country="France",
        flag="🇫🇷",
        color="#000091",
        requirements=(
            "Images have appropriate text alternatives",
            "Valid code according to specifications",
            "No information by color alone",
            "French government typography (Marianne font)",
        ),
    ),
    Standard(
        code="EN301549",
        full_name="European Standard EN 301 549 V3.2.1",
        country="Netherlands/EU",
        flag="🇳🇱",
        color="#FF6900",
        requirements=(
            "Well-formed markup",
            "Content reflows without horizontal scrolling",
            "WCAG 2.1 AA compliance",
            "Efficient interaction patterns",
        ),
    ),
    Standard(
        code="DOS",
        full_name="Dos lagen om tillgänglighet 2018:1937",
        country="Sweden",
        flag="🇸🇪",
        color="#005A9F",
        requirements=(
            "Info and relationships programmatically determined",
            "Labels or instructions for user input",
            "Mobile accessibility (48px touch targets)",
            "Swedish language support",
        ),
    ),
)


def get_standard(code: str) -> Standard:
    """Look up a registered standard.

    Raises:
        UnknownStandardError: if ``code`` is not in the registry
    """
    try:
        return STANDARDS[code]
    except KeyError:
        raise UnknownStandardError(code) from None


def threshold_for(code: str) -> int:
    """Threshold for ``code``; unrecognized codes get the strict default."""
    try:
        return get_standard(code).threshold
    except UnknownStandardError:
        logger.debug("Unknown standard %s, using threshold %d%%", code, DEFAULT_THRESHOLD)
        return DEFAULT_THRESHOLD
