# ============================================================================
# src/bloodwork/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the blood report extraction engine.
"""


class BloodworkError(Exception):
    """Base exception for all blood report errors."""
    pass


class InputTypeError(BloodworkError, TypeError):
    """Extraction input is not a string."""
    def __init__(self, received: object):
        super().__init__(
            f"Report text must be a string, got {type(received).__name__}"
        )
        self.received_type = type(received).__name__


class TextExtractionError(BloodworkError):
    """Error reading text out of an uploaded report."""
    pass


class UnsupportedFileTypeError(TextExtractionError):
    """No text source can handle this file type."""
    def __init__(self, message: str, suffix: str):
        super().__init__(message)
        self.suffix = suffix


class UploadValidationError(BloodworkError):
    """Uploaded file rejected (wrong type, too large, missing fields)."""
    pass


class UploadNotFoundError(BloodworkError):
    """Referenced upload does not exist."""
    pass


class ConfirmationError(BloodworkError):
    """Confirm request is missing required fields."""
    pass


class MarkerStoreError(BloodworkError):
    """Error persisting or reading blood markers."""
    pass
