# ============================================================================
# src/bloodwork/utils/__init__.py
# ============================================================================
"""
Utility modules for the blood report engine.
"""

from .exceptions import (
    BloodworkError,
    InputTypeError,
    TextExtractionError,
    UnsupportedFileTypeError,
    UploadValidationError,
    UploadNotFoundError,
    ConfirmationError,
    MarkerStoreError,
)

from .logging import (
    setup_logging,
    JsonFormatter,
    log_performance,
)

__all__ = [
    # Exceptions
    'BloodworkError',
    'InputTypeError',
    'TextExtractionError',
    'UnsupportedFileTypeError',
    'UploadValidationError',
    'UploadNotFoundError',
    'ConfirmationError',
    'MarkerStoreError',
    # Logging
    'setup_logging',
    'JsonFormatter',
    'log_performance',
]
