# ============================================================================
# src/bloodwork/core/results.py
# ============================================================================
"""
Extraction result representation
- Candidate values scored per strategy
- One extracted parameter per analyte found
- Per-report result with summary statistics

Attributes are snake_case; to_dict() emits the camelCase keys the upload
client and marker store consume.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .enums import ParameterStatus


@dataclass
class ExtractionCandidate:
    value: float
    unit: str = ""
    confidence: float = 0.0
    strategy: str = "unknown"  # "unit", "unit_thousands", "bare"


@dataclass(frozen=True)
class ExtractedParameter:
    display_name: str
    value: float
    unit: str
    confidence: float
    normal_range: str
    status: ParameterStatus
    raw_text: str  # Matched source line, trimmed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "displayName": self.display_name,
            "value": self.value,
            "unit": self.unit,
            "confidence": self.confidence,
            "normalRange": self.normal_range,
            "status": self.status.value,
            "rawText": self.raw_text,
        }


@dataclass(frozen=True)
class ExtractionSummary:
    total_parameters: int = 0
    high_confidence: int = 0
    medium_confidence: int = 0
    low_confidence: int = 0
    average_confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalParameters": self.total_parameters,
            "highConfidence": self.high_confidence,
            "mediumConfidence": self.medium_confidence,
            "lowConfidence": self.low_confidence,
            "averageConfidence": round(self.average_confidence, 4),
        }


@dataclass
class ExtractionResult:
    parameters: Dict[str, ExtractedParameter] = field(default_factory=dict)
    summary: ExtractionSummary = field(default_factory=ExtractionSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parameters": {
                key: parameter.to_dict()
                for key, parameter in self.parameters.items()
            },
            "summary": self.summary.to_dict(),
        }

    def values(self) -> Dict[str, float]:
        """Analyte key -> numeric value, the shape the marker store keeps."""
        return {key: parameter.value for key, parameter in self.parameters.items()}
