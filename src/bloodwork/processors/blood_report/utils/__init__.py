# src/bloodwork/processors/blood_report/utils/__init__.py
"""
Blood report utilities
"""

from .parsing import (
    parse_numeric_value,
    compile_value_pattern,
    find_synonym_offset,
)
