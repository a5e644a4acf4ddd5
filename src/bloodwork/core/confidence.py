# ============================================================================
# src/bloodwork/core/confidence.py
# ============================================================================
"""
Confidence Scoring Helpers

Provides utilities for:
- Clamping heuristic scores into [0, 1]
- Bucketing scores into high / medium / low
- Summarizing a set of extracted parameters
"""

from typing import Iterable, Optional
from dataclasses import dataclass
import math
import statistics

from ..config import threshold_settings
from .enums import ConfidenceLevel
from .results import ExtractedParameter, ExtractionSummary


def clamp_confidence(score: float) -> float:
    """Clamp a score into [0.0, 1.0]. NaN becomes 0.0."""
    if math.isnan(score):
        return 0.0
    return max(0.0, min(1.0, score))


@dataclass
class ConfidenceThresholds:
    """Confidence level thresholds"""
    high: float = 0.8
    medium: float = 0.5

    @classmethod
    def from_settings(cls) -> "ConfidenceThresholds":
        return cls(
            high=threshold_settings.HIGH_CONFIDENCE_THRESHOLD,
            medium=threshold_settings.MEDIUM_CONFIDENCE_THRESHOLD,
        )

    def get_level(self, score: float) -> ConfidenceLevel:
        """
        Get confidence level from score.

        High is strictly above the high threshold; medium includes both
        of its bounds.
        """
        if score > self.high:
            return ConfidenceLevel.HIGH
        elif score >= self.medium:
            return ConfidenceLevel.MEDIUM
        else:
            return ConfidenceLevel.LOW


def summarize(
    parameters: Iterable[ExtractedParameter],
    thresholds: Optional[ConfidenceThresholds] = None,
) -> ExtractionSummary:
    """
    Count parameters per confidence bucket and average their confidence.

    Args:
        parameters: Extracted parameters of one report
        thresholds: Bucket thresholds (defaults to configured values)

    Returns:
        ExtractionSummary (all zeros for no parameters)
    """
    thresholds = thresholds or ConfidenceThresholds.from_settings()
    scores = [p.confidence for p in parameters]

    levels = [thresholds.get_level(score) for score in scores]
    return ExtractionSummary(
        total_parameters=len(scores),
        high_confidence=levels.count(ConfidenceLevel.HIGH),
        medium_confidence=levels.count(ConfidenceLevel.MEDIUM),
        low_confidence=levels.count(ConfidenceLevel.LOW),
        average_confidence=statistics.mean(scores) if scores else 0.0,
    )
