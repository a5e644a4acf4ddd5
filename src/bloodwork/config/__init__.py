# ============================================================================
# src/bloodwork/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .base_config import base_settings, BaseSettingsConfig
from .thresholds_config import threshold_settings, ThresholdSettings
from .extraction_config import extraction_settings, ExtractionSettings
from .logging_config import logging_settings, LoggingSettings
