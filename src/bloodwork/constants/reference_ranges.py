# ============================================================================
# src/bloodwork/constants/reference_ranges.py
# ============================================================================
"""
Numeric Reference Ranges
- Machine-comparable {low, high} bounds used for status classification
- Kept apart from the catalog's human-readable range text

Bounds are inclusive and take the wider of the sex-specific ranges.
Analytes without a closed numeric range (HDL: "40 mg/dL or higher") are
deliberately absent and classify as "unknown".
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class NumericRange:
    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


NUMERIC_RANGES: Mapping[str, NumericRange] = MappingProxyType({
    # Complete blood count
    "rbc": NumericRange(4.1, 5.9),                  # mill/mm³
    "hemoglobin": NumericRange(12.0, 17.5),         # g/dL
    "wbc": NumericRange(4500.0, 11000.0),           # cells/mm³
    "platelets": NumericRange(150.0, 450.0),        # 10³/µL

    # Lipids ("less than" ranges start at zero)
    "ldl": NumericRange(0.0, 100.0),
    "total_cholesterol": NumericRange(0.0, 200.0),
    "triglycerides": NumericRange(0.0, 150.0),

    # Vitamins
    "vitamin_b12": NumericRange(200.0, 900.0),
    "vitamin_d": NumericRange(20.0, 50.0),

    # Glycemic (glucose: random range, not the 70-99 fasting range)
    "hba1c": NumericRange(0.0, 5.6),
    "glucose": NumericRange(70.0, 140.0),

    # Thyroid
    "tsh": NumericRange(0.4, 4.0),

    # Kidney / metabolic
    "creatinine": NumericRange(0.6, 1.3),
    "uric_acid": NumericRange(2.5, 7.2),
    "calcium": NumericRange(8.5, 10.5),
    "sodium": NumericRange(135.0, 145.0),
    "potassium": NumericRange(3.5, 5.0),
})
