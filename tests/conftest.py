# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest

from bloodwork.core.marker_store import MarkerStore
from bloodwork.core.pipeline import BloodReportPipeline
from bloodwork.processors.blood_report.agents.value_extractor import ValueExtractor
from bloodwork.processors.blood_report.processor import BloodReportProcessor


@pytest.fixture
def sample_blood_report_text():
    """Full panel report, one analyte per line, every value with its unit"""
    return """
    CITY DIAGNOSTICS - BLOOD REPORT
    Patient: Test User          Date: 2025-05-10

    COMPLETE BLOOD COUNT
    Hemoglobin              16.3 g/dL         13.5-17.5
    RBC Count               5.80 mill/mm³     4.5-5.9
    WBC Count               5,560 cells/mm³   4000-11000
    Platelet Count          309 10³/µL        150-450

    LIPID PROFILE
    Total Cholesterol       144 mg/dL
    HDL Cholesterol         38 mg/dL
    LDL Cholesterol         96 mg/dL
    Triglycerides           50 mg/dL

    VITAMINS
    Vitamin B12             405 pg/mL
    Vitamin D (25-OH)       48.2 ng/mL

    DIABETES
    HbA1c                   5.1 %
    Glucose (Random)        89 mg/dL

    THYROID / KIDNEY / ELECTROLYTES
    TSH                     2.504 µIU/mL
    Creatinine              0.7 mg/dL
    Uric Acid               4.4 mg/dL
    Calcium                 9.3 mg/dL
    Sodium                  134 mmol/L
    Potassium               4.8 mmol/L
    """


@pytest.fixture
def processor():
    """Processor with default catalog and scoring"""
    return BloodReportProcessor()


@pytest.fixture
def value_extractor():
    """Value extractor with default scoring"""
    return ValueExtractor()


@pytest.fixture
def marker_store(tmp_path):
    """Marker store on a temporary database"""
    return MarkerStore(tmp_path / "markers.db")


@pytest.fixture
def pipeline(tmp_path, marker_store):
    """Pipeline over temporary upload dir and store"""
    return BloodReportPipeline(
        upload_dir=tmp_path / "uploads",
        store=marker_store,
    )
