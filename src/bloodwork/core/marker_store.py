# ============================================================================
# src/bloodwork/core/marker_store.py
# ============================================================================
"""
Marker Store

Persists each user's confirmed blood markers to SQLite so they survive API
restarts. One record per user; confirming a new report replaces it.

Record shape (what GET /api/blood-markers/{userId} serves back):
    {userId, markers: {analyte_key: value}, lastUpdated, source,
     reportDate, reportId}
"""

import sqlite3
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from datetime import date, datetime, timezone

from ..constants import lookup
from ..utils.exceptions import MarkerStoreError
from .results import ExtractedParameter

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "blood_report_upload"


def _marker_value(parameter: Any) -> Optional[float]:
    """Numeric value out of an ExtractedParameter, a {"value": ...} dict or a number."""
    if isinstance(parameter, ExtractedParameter):
        return parameter.value
    if isinstance(parameter, Mapping):
        parameter = parameter.get("value")
    if isinstance(parameter, bool):
        return None
    if isinstance(parameter, (int, float)):
        return float(parameter)
    if isinstance(parameter, str):
        try:
            return float(parameter.replace(",", ""))
        except ValueError:
            return None
    return None


def build_marker_record(
    user_id: str,
    report_id: str,
    parameters: Mapping[str, Any],
    report_date: Optional[str] = None,
    source: str = DEFAULT_SOURCE,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Build the persisted marker record from confirmed parameters.

    Keys that are not catalog analytes, or whose value is not numeric, are
    dropped.

    Args:
        user_id: Owner of the report
        report_id: Report the values were confirmed from
        parameters: analyte key -> ExtractedParameter / {"value": v} / v
        report_date: ISO-8601 date of the blood draw (defaults to today)
        source: Tag describing where the values came from
        now: Timestamp override (tests)

    Returns:
        Marker record dict
    """
    now = now or datetime.now(timezone.utc)

    markers: Dict[str, float] = {}
    for key, parameter in parameters.items():
        if lookup(key) is None:
            logger.warning(f"Dropping unknown marker '{key}' for user {user_id}")
            continue
        value = _marker_value(parameter)
        if value is None:
            logger.warning(f"Dropping non-numeric marker '{key}' for user {user_id}")
            continue
        markers[key] = value

    return {
        "userId": user_id,
        "markers": markers,
        "lastUpdated": now.isoformat(),
        "source": source,
        "reportDate": report_date or date.today().isoformat(),
        "reportId": report_id,
    }


class MarkerStore:
    """
    SQLite-backed store for confirmed blood markers.

    Stores the full record as JSON so the API can serve it back without any
    transformation.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._init_database()

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------
    def _init_database(self):
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._connect()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS blood_markers (
                    user_id       TEXT PRIMARY KEY,
                    report_id     TEXT NOT NULL,
                    report_date   TEXT,
                    last_updated  TEXT NOT NULL,
                    record_data   TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()
        logger.info(f"Marker store initialized: {self.db_path}")

    def _connect(self) -> sqlite3.Connection:
        try:
            return sqlite3.connect(str(self.db_path))
        except sqlite3.Error as e:
            raise MarkerStoreError(f"Cannot open marker store {self.db_path}: {e}") from e

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------
    def save(self, record: Dict[str, Any]) -> None:
        """
        Persist a user's marker record, replacing any previous one.

        Args:
            record: Record from build_marker_record()
        """
        user_id = record.get("userId")
        if not user_id:
            raise MarkerStoreError("Marker record has no userId")

        conn = self._connect()
        try:
            conn.execute("""
                INSERT OR REPLACE INTO blood_markers
                    (user_id, report_id, report_date, last_updated, record_data)
                VALUES (?, ?, ?, ?, ?)
            """, (
                user_id,
                record.get("reportId", ""),
                record.get("reportDate"),
                record.get("lastUpdated", datetime.now(timezone.utc).isoformat()),
                json.dumps(record, default=str),
            ))
            conn.commit()
        except sqlite3.Error as e:
            raise MarkerStoreError(f"Failed to save markers for {user_id}: {e}") from e
        finally:
            conn.close()
        logger.info(
            f"Saved {len(record.get('markers', {}))} markers for user {user_id}"
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------
    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Retrieve a user's marker record."""
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT record_data FROM blood_markers WHERE user_id = ?",
                (user_id,)
            ).fetchone()
        except sqlite3.Error as e:
            raise MarkerStoreError(f"Failed to read markers for {user_id}: {e}") from e
        finally:
            conn.close()
        if row:
            return json.loads(row[0])
        return None

    def count(self) -> int:
        """Number of users with stored markers."""
        conn = self._connect()
        try:
            return conn.execute("SELECT COUNT(*) FROM blood_markers").fetchone()[0]
        except sqlite3.Error as e:
            raise MarkerStoreError(f"Failed to count marker records: {e}") from e
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------
    def delete(self, user_id: str) -> bool:
        """Delete a user's markers. Returns True if a row was removed."""
        conn = self._connect()
        try:
            cur = conn.execute("DELETE FROM blood_markers WHERE user_id = ?", (user_id,))
            conn.commit()
            return cur.rowcount > 0
        except sqlite3.Error as e:
            raise MarkerStoreError(f"Failed to delete markers for {user_id}: {e}") from e
        finally:
            conn.close()
