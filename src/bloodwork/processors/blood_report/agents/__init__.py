# ============================================================================
# src/bloodwork/processors/blood_report/agents/__init__.py
# ============================================================================
"""
Blood report extraction agents
"""

from .line_scanner import LineScanner, LineMatch, split_lines
from .value_extractor import ValueExtractor, ExtractionStrategy, build_strategies
from .status_classifier import StatusClassifier
