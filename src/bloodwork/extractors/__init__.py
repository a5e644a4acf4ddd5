# ============================================================================
# src/bloodwork/extractors/__init__.py
# ============================================================================
"""
Report text acquisition
"""

from .text_extractor import (
    TextSource,
    PlainTextSource,
    PdfTextSource,
    TEXT_SOURCES,
    get_text_source,
)

__all__ = [
    'TextSource',
    'PlainTextSource',
    'PdfTextSource',
    'TEXT_SOURCES',
    'get_text_source',
]
