# ============================================================================
# src/bloodwork/__init__.py
# ============================================================================
"""
Blood report parameter extraction.

    from bloodwork import extract

    result = extract("Hemoglobin: 16.3 g/dL\nGlucose 89 mg/dL")
    result.parameters["hemoglobin"].status  # ParameterStatus.NORMAL
"""

from .processors.blood_report import BloodReportProcessor, extract, get_processor
from .core import (
    ParameterStatus,
    ExtractedParameter,
    ExtractionSummary,
    ExtractionResult,
    MarkerStore,
    build_marker_record,
)
from .core.pipeline import BloodReportPipeline
from .constants import ANALYTE_CATALOG, AnalyteDefinition, lookup

__version__ = "0.1.0"

__all__ = [
    'extract',
    'get_processor',
    'BloodReportProcessor',
    'BloodReportPipeline',
    'ParameterStatus',
    'ExtractedParameter',
    'ExtractionSummary',
    'ExtractionResult',
    'MarkerStore',
    'build_marker_record',
    'ANALYTE_CATALOG',
    'AnalyteDefinition',
    'lookup',
]
