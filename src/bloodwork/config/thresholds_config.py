# ============================================================================
# src/bloodwork/config/thresholds_config.py
# ============================================================================
"""
Confidence Thresholds
- High / medium / low buckets for the extraction summary
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class ThresholdSettings(BaseSettings):
    HIGH_CONFIDENCE_THRESHOLD: float = Field(
        default=0.8,
        ge=0.0, le=1.0,
        description="Confidence strictly above this counts as high"
    )
    MEDIUM_CONFIDENCE_THRESHOLD: float = Field(
        default=0.5,
        ge=0.0, le=1.0,
        description="Confidence at or above this (up to the high threshold, inclusive) counts as medium"
    )

    @model_validator(mode="after")
    def check_ordering(self):
        if self.MEDIUM_CONFIDENCE_THRESHOLD > self.HIGH_CONFIDENCE_THRESHOLD:
            raise ValueError(
                "MEDIUM_CONFIDENCE_THRESHOLD must not exceed HIGH_CONFIDENCE_THRESHOLD"
            )
        return self


threshold_settings = ThresholdSettings()
