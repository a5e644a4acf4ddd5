# ============================================================================
# src/bloodwork/config/extraction_config.py
# ============================================================================
"""
Value Extraction Scoring
- Base confidence per extraction strategy
- Boosts for unit, plausible magnitude, synonym position
- Neighbor line fallback
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class ExtractionSettings(BaseSettings):
    UNIT_BASE_CONFIDENCE: float = Field(
        default=0.5,
        ge=0.0, le=1.0,
        description="Number directly followed by a known unit"
    )
    UNIT_THOUSANDS_BASE_CONFIDENCE: float = Field(
        default=0.45,
        ge=0.0, le=1.0,
        description="Number with thousands separators followed by a known unit"
    )
    BARE_BASE_CONFIDENCE: float = Field(
        default=0.3,
        ge=0.0, le=1.0,
        description="Bare number, no unit. Lowest-confidence fallback."
    )
    UNIT_BOOST: float = Field(
        default=0.3,
        ge=0.0, le=1.0,
        description="Added when a recognized unit follows the value"
    )
    MAGNITUDE_BOOST: float = Field(
        default=0.2,
        ge=0.0, le=1.0,
        description="Added when the value lies in a plausible medical magnitude"
    )
    NEAR_START_BOOST: float = Field(
        default=0.15,
        ge=0.0, le=1.0,
        description="Added when the synonym appears near the start of the line"
    )
    NEAR_START_WINDOW: int = Field(
        default=15,
        ge=0,
        description="Synonym offset (chars into the trimmed line) still considered near the start"
    )
    PLAUSIBLE_MAX: float = Field(
        default=10_000.0,
        gt=0.0,
        description="Values at or above this get no magnitude boost"
    )
    NEIGHBOR_LINES: int = Field(
        default=0,
        ge=0, le=5,
        description="Following lines searched when the matched line has no value. 0 = matched line only."
    )
    NEIGHBOR_LINE_PENALTY: float = Field(
        default=0.1,
        ge=0.0, le=1.0,
        description="Subtracted per line of distance for values read from a following line"
    )


extraction_settings = ExtractionSettings()
