# ============================================================================
# src/bloodwork/processors/blood_report/agents/status_classifier.py
# ============================================================================
"""
Status Classifier - Value vs Reference Range

Different from the catalog's range text: this uses the machine-comparable
NUMERIC_RANGES table. Bounds are inclusive on both ends.

Example:
- Hemoglobin 10.0 g/dL (12.0-17.5) → low
- Sodium 134 mmol/L (135-145) → low
- HDL 38 mg/dL (no numeric range) → unknown
"""

from typing import Mapping, Optional
import logging

from ....constants import NUMERIC_RANGES, NumericRange
from ....core.enums import ParameterStatus


class StatusClassifier:
    """
    Classify extracted values as low / normal / high / unknown.
    """

    def __init__(self, ranges: Optional[Mapping[str, NumericRange]] = None):
        self.ranges = NUMERIC_RANGES if ranges is None else ranges
        self.logger = logging.getLogger(__name__)

    def classify(self, value: float, analyte_key: str) -> ParameterStatus:
        numeric_range = self.ranges.get(analyte_key)
        if numeric_range is None:
            self.logger.debug(f"{analyte_key}: no numeric range registered")
            return ParameterStatus.UNKNOWN

        if numeric_range.contains(value):
            return ParameterStatus.NORMAL
        if value < numeric_range.low:
            return ParameterStatus.LOW
        return ParameterStatus.HIGH
