# ============================================================================
# src/bloodwork/core/__init__.py
# ============================================================================
"""
Core types and collaborators for the blood report engine.

The pipeline is imported from bloodwork.core.pipeline directly; it depends
on the processors package, which itself depends on this package.
"""

from .enums import ParameterStatus, ConfidenceLevel
from .results import (
    ExtractionCandidate,
    ExtractedParameter,
    ExtractionSummary,
    ExtractionResult,
)
from .confidence import ConfidenceThresholds, clamp_confidence, summarize
from .marker_store import MarkerStore, build_marker_record

__all__ = [
    'ParameterStatus',
    'ConfidenceLevel',
    'ExtractionCandidate',
    'ExtractedParameter',
    'ExtractionSummary',
    'ExtractionResult',
    'ConfidenceThresholds',
    'clamp_confidence',
    'summarize',
    'MarkerStore',
    'build_marker_record',
]
