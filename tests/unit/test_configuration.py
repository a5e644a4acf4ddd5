# ============================================================================
# FILE: tests/unit/test_configuration.py
# ============================================================================
"""
Unit tests for settings defaults, environment overrides and validation
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from bloodwork.config import (
    BaseSettingsConfig,
    ExtractionSettings,
    LoggingSettings,
    ThresholdSettings,
)


def test_threshold_defaults():
    settings = ThresholdSettings()

    assert settings.HIGH_CONFIDENCE_THRESHOLD == 0.8
    assert settings.MEDIUM_CONFIDENCE_THRESHOLD == 0.5


def test_threshold_ordering_enforced():
    with pytest.raises(ValidationError):
        ThresholdSettings(HIGH_CONFIDENCE_THRESHOLD=0.4, MEDIUM_CONFIDENCE_THRESHOLD=0.6)


def test_threshold_out_of_range():
    with pytest.raises(ValidationError):
        ThresholdSettings(HIGH_CONFIDENCE_THRESHOLD=1.5)


def test_extraction_defaults():
    settings = ExtractionSettings()

    assert settings.UNIT_BASE_CONFIDENCE == 0.5
    assert settings.UNIT_THOUSANDS_BASE_CONFIDENCE == 0.45
    assert settings.BARE_BASE_CONFIDENCE == 0.3
    assert settings.UNIT_BOOST == 0.3
    assert settings.MAGNITUDE_BOOST == 0.2
    assert settings.NEAR_START_BOOST == 0.15
    assert settings.NEIGHBOR_LINES == 0


def test_extraction_env_override(monkeypatch):
    monkeypatch.setenv("NEIGHBOR_LINES", "2")
    monkeypatch.setenv("PLAUSIBLE_MAX", "5000")

    settings = ExtractionSettings()

    assert settings.NEIGHBOR_LINES == 2
    assert settings.PLAUSIBLE_MAX == 5000.0


def test_neighbor_lines_capped():
    with pytest.raises(ValidationError):
        ExtractionSettings(NEIGHBOR_LINES=10)


def test_base_settings_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "1024")

    settings = BaseSettingsConfig()

    assert settings.UPLOAD_DIR == tmp_path / "uploads"
    assert settings.MAX_UPLOAD_BYTES == 1024


def test_create_directories(tmp_path):
    settings = BaseSettingsConfig(
        UPLOAD_DIR=tmp_path / "uploads",
        MARKER_DB_PATH=tmp_path / "db" / "markers.db",
    )
    settings.create_directories()

    assert (tmp_path / "uploads").is_dir()
    assert (tmp_path / "db").is_dir()


def test_logging_defaults():
    settings = LoggingSettings()

    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_JSON is False
    assert settings.LOG_FILE is None


def test_logging_env_override(monkeypatch):
    monkeypatch.setenv("LOG_JSON", "true")
    monkeypatch.setenv("LOG_FILE", "logs/bloodwork.log")

    settings = LoggingSettings()

    assert settings.LOG_JSON is True
    assert settings.LOG_FILE == Path("logs/bloodwork.log")
