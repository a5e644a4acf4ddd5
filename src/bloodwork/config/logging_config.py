# ============================================================================
# src/bloodwork/config/logging_config.py
# ============================================================================
"""
Logging Settings
- Log level
- JSON output
"""

from pathlib import Path
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit one JSON object per log line"
    )
    LOG_FILE: Optional[Path] = Field(
        default=None,
        description="Optional log file in addition to stdout"
    )


logging_settings = LoggingSettings()
