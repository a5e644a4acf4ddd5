# ============================================================================
# src/bloodwork/constants/units.py
# ============================================================================
"""
Unit Vocabulary
- Canonical unit spellings recognized after a numeric value
- Common alternate spellings (ascii "u" for µ, "3" for ³, greek mu)
"""

from types import MappingProxyType
from typing import Mapping, Optional

# Lowercased spelling -> canonical spelling
UNIT_ALIASES: Mapping[str, str] = MappingProxyType({
    "mg/dl": "mg/dL",
    "g/dl": "g/dL",
    "mmol/l": "mmol/L",
    "pg/ml": "pg/mL",
    "ng/ml": "ng/mL",
    "µiu/ml": "µIU/mL",
    "μiu/ml": "µIU/mL",   # greek small mu
    "uiu/ml": "µIU/mL",
    "mill/mm³": "mill/mm³",
    "mill/mm3": "mill/mm³",
    "cells/mm³": "cells/mm³",
    "cells/mm3": "cells/mm³",
    "10³/µl": "10³/µL",
    "10³/μl": "10³/µL",
    "10³/ul": "10³/µL",
    "10^3/µl": "10³/µL",
    "10^3/ul": "10³/µL",
    "%": "%",
})


def normalize_unit(raw: str) -> Optional[str]:
    """Map a matched unit token to its canonical spelling."""
    if not raw:
        return None
    return UNIT_ALIASES.get(raw.strip().lower())
