# ============================================================================
# src/bloodwork/constants/analyte_catalog.py
# ============================================================================
"""
Blood Parameter Catalog
- Canonical key, synonyms, display name, default unit
- Human-readable normal range and a one-line explanation
- Numeric range (if the analyte has machine-comparable bounds)

Synonyms are matched as case-insensitive substrings of a report line, in
declared order. Avoid synonyms that are substrings of another analyte's
name (e.g. "hb" would also hit "HbA1c"). Where a synonym is unavoidably
contained in a related test name ("HDL" in "Non-HDL", "Hemoglobin" in
"Glycated Hemoglobin"), list that name under exclusions: lines containing
an exclusion are never matched for the analyte.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from .reference_ranges import NUMERIC_RANGES, NumericRange


@dataclass(frozen=True)
class AnalyteDefinition:
    key: str
    synonyms: Tuple[str, ...]
    display_name: str
    default_unit: str
    normal_range_text: str
    explanation: str = ""
    numeric_range: Optional[NumericRange] = None
    exclusions: Tuple[str, ...] = ()


def _analyte(key: str, synonyms: Tuple[str, ...], display_name: str,
             default_unit: str, normal_range_text: str,
             explanation: str,
             exclusions: Tuple[str, ...] = ()) -> AnalyteDefinition:
    return AnalyteDefinition(
        key=key,
        synonyms=synonyms,
        display_name=display_name,
        default_unit=default_unit,
        normal_range_text=normal_range_text,
        explanation=explanation,
        numeric_range=NUMERIC_RANGES.get(key),
        exclusions=exclusions,
    )


ANALYTE_CATALOG: Tuple[AnalyteDefinition, ...] = (
    # Complete blood count
    _analyte(
        "rbc",
        ("rbc", "red blood cell", "erythrocyte count"),
        "RBC", "mill/mm³",
        "4.5-5.9 million cells/mcL (men); 4.1-5.1 (women)",
        "Carries oxygen from lungs to tissues and carbon dioxide back to lungs",
        exclusions=("nrbc", "nucleated"),
    ),
    _analyte(
        "hemoglobin",
        ("hemoglobin", "haemoglobin", "hgb"),
        "Hemoglobin", "g/dL",
        "13.5-17.5 g/dL (men); 12.0-15.5 (women)",
        "Protein in red blood cells that carries oxygen",
        exclusions=("glycated", "glycosylated", "a1c", "corpuscular"),
    ),
    _analyte(
        "wbc",
        ("wbc", "white blood cell", "total leukocyte count", "total leucocyte count"),
        "WBC", "cells/mm³",
        "4,500-11,000 cells/mcL",
        "Part of immune system, helps fight infections",
    ),
    _analyte(
        "platelets",
        ("platelet count", "platelets", "platelet", "plt"),
        "Platelet Count", "10³/µL",
        "150,000-450,000 platelets/mcL",
        "Helps blood clot, prevents excessive bleeding",
        exclusions=("mean platelet", "platelet distribution"),
    ),

    # Lipid panel
    _analyte(
        "hdl",
        ("hdl cholesterol", "hdl", "high density lipoprotein"),
        "HDL Cholesterol", "mg/dL",
        "40 mg/dL or higher (men); 50 or higher (women)",
        "'Good' cholesterol that helps remove other forms of cholesterol",
        exclusions=("non-hdl", "non hdl", "ratio"),
    ),
    _analyte(
        "ldl",
        ("ldl cholesterol", "ldl", "low density lipoprotein"),
        "LDL Cholesterol", "mg/dL",
        "Less than 100 mg/dL",
        "'Bad' cholesterol that can build up in arteries",
        exclusions=("vldl", "very low density", "ratio"),
    ),
    _analyte(
        "total_cholesterol",
        ("total cholesterol", "cholesterol, total", "cholesterol total", "serum cholesterol"),
        "Total Cholesterol", "mg/dL",
        "Less than 200 mg/dL",
        "Fatty substance in blood, needed for cell building",
        exclusions=("ratio",),
    ),
    _analyte(
        "triglycerides",
        ("triglycerides", "triglyceride"),
        "Triglycerides", "mg/dL",
        "Less than 150 mg/dL",
        "Type of fat in blood that stores excess energy",
    ),

    # Vitamins
    _analyte(
        "vitamin_b12",
        ("vitamin b12", "vit b12", "vitamin b-12", "cobalamin"),
        "Vitamin B12", "pg/mL",
        "200-900 pg/mL",
        "Helps make DNA and red blood cells, supports nerve function",
    ),
    _analyte(
        "vitamin_d",
        ("vitamin d", "vit d", "25-hydroxy", "25-oh d"),
        "Vitamin D", "ng/mL",
        "20-50 ng/mL",
        "Helps body absorb calcium, important for bone health",
    ),

    # Glycemic
    _analyte(
        "hba1c",
        ("hba1c", "hb a1c", "glycated", "glycosylated", "a1c"),
        "HbA1C", "%",
        "Below 5.7%",
        "Average blood glucose levels over the past 2-3 months",
    ),
    _analyte(
        "glucose",
        ("glucose", "blood sugar"),
        "Glucose (Random)", "mg/dL",
        "70-140 mg/dL (random); 70-99 mg/dL (fasting)",
        "Blood sugar level",
    ),

    # Thyroid
    _analyte(
        "tsh",
        ("tsh", "thyroid stimulating hormone", "thyrotropin"),
        "TSH", "µIU/mL",
        "0.4-4.0 µIU/mL",
        "Thyroid stimulating hormone, controls thyroid gland function",
    ),

    # Kidney / metabolic
    _analyte(
        "creatinine",
        ("creatinine",),
        "Creatinine", "mg/dL",
        "0.7-1.3 mg/dL (men); 0.6-1.1 mg/dL (women)",
        "Waste product filtered by kidneys, indicator of kidney function",
    ),
    _analyte(
        "uric_acid",
        ("uric acid", "serum urate"),
        "Uric Acid", "mg/dL",
        "3.5-7.2 mg/dL (men); 2.5-6.0 mg/dL (women)",
        "Waste product from breakdown of purines in food",
    ),
    _analyte(
        "calcium",
        ("calcium",),
        "Calcium", "mg/dL",
        "8.5-10.5 mg/dL",
        "Essential for bone health, muscle function, and nerve signaling",
    ),
    _analyte(
        "sodium",
        ("sodium",),
        "Sodium", "mmol/L",
        "135-145 mmol/L",
        "Electrolyte that helps maintain fluid balance and nerve/muscle function",
    ),
    _analyte(
        "potassium",
        ("potassium",),
        "Potassium", "mmol/L",
        "3.5-5.0 mmol/L",
        "Electrolyte essential for heart, muscle, and nerve function",
    ),
)

_BY_KEY: Mapping[str, AnalyteDefinition] = MappingProxyType(
    {analyte.key: analyte for analyte in ANALYTE_CATALOG}
)

ANALYTE_KEYS: Tuple[str, ...] = tuple(_BY_KEY)


def lookup(key: str) -> Optional[AnalyteDefinition]:
    """Get the catalog entry for an analyte key, or None."""
    return _BY_KEY.get(key)


def iter_analytes() -> Iterator[AnalyteDefinition]:
    """Iterate catalog entries in declared (stable) order."""
    return iter(ANALYTE_CATALOG)
