# ============================================================================
# src/bloodwork/config/base_config.py
# ============================================================================
"""
Base Configuration
- Upload directory for blood reports
- Marker store database
- Upload limits
"""

from pathlib import Path
from typing import Tuple
from pydantic import Field
from pydantic_settings import BaseSettings


class BaseSettingsConfig(BaseSettings):
    # Uploaded reports, one subdirectory per user
    UPLOAD_DIR: Path = Field(
        default=Path("data/uploads/blood-reports"),
        description="Directory where uploaded blood reports are stored"
    )

    # Confirmed markers
    MARKER_DB_PATH: Path = Field(
        default=Path("data/blood_markers.db"),
        description="SQLite database holding each user's confirmed blood markers"
    )

    MAX_UPLOAD_BYTES: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Largest accepted upload (10MB)"
    )

    ALLOWED_EXTENSIONS: Tuple[str, ...] = Field(
        default=(".pdf", ".txt"),
        description="File extensions a text source exists for"
    )

    def create_directories(self):
        """Create all necessary directories if they don't exist"""
        dirs = [
            self.UPLOAD_DIR,
            self.MARKER_DB_PATH.parent
        ]
        for directory in dirs:
            directory.mkdir(parents=True, exist_ok=True)


# Global instance
base_settings = BaseSettingsConfig()
