# ============================================================================
# src/bloodwork/core/enums.py
# ============================================================================
"""
Extraction Enums
- Parameter status against the reference range
- Confidence buckets
"""

from enum import Enum


class ParameterStatus(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    UNKNOWN = "unknown"  # No numeric range registered


class ConfidenceLevel(str, Enum):
    HIGH = "high"       # > 0.8
    MEDIUM = "medium"   # 0.5 - 0.8 inclusive
    LOW = "low"         # < 0.5
