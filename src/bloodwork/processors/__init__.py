# ============================================================================
# src/bloodwork/processors/__init__.py
# ============================================================================
"""
Document processors
"""

from .blood_report import BloodReportProcessor, extract

__all__ = ['BloodReportProcessor', 'extract']
