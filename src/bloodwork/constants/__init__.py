# ============================================================================
# src/bloodwork/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .reference_ranges import NUMERIC_RANGES, NumericRange
from .units import UNIT_ALIASES, normalize_unit
from .analyte_catalog import (
    ANALYTE_CATALOG,
    ANALYTE_KEYS,
    AnalyteDefinition,
    lookup,
    iter_analytes,
)
