# ============================================================================
# src/bloodwork/processors/blood_report/__init__.py
# ============================================================================
"""
Blood report processor: text → structured blood parameters
"""

from .processor import BloodReportProcessor, extract, get_processor

__all__ = ['BloodReportProcessor', 'extract', 'get_processor']
