# ============================================================================
# src/bloodwork/core/pipeline.py
# ============================================================================
"""
Blood Report Pipeline

Upload → process → confirm → fetch, with every collaborator injected:
- upload_dir:            where uploaded reports live (one folder per user)
- text_source_factory:   file path → TextSource (PDF / plain text)
- processor:             BloodReportProcessor (the extraction engine)
- store:                 MarkerStore (confirmed markers)

The pipeline owns no global state; the API builds one from settings and
tests build one over temporary directories.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Optional
from datetime import datetime, timezone
import logging
import re
import uuid

from ..config import base_settings
from ..extractors.text_extractor import TextSource, get_text_source
from ..processors.blood_report.processor import BloodReportProcessor
from ..utils.exceptions import (
    ConfirmationError,
    UploadNotFoundError,
    UploadValidationError,
)
from ..utils.logging import log_performance
from .marker_store import MarkerStore, build_marker_record
from .results import ExtractionResult

logger = logging.getLogger(__name__)

# User ids become directory names
_SAFE_ID = re.compile(r'^[A-Za-z0-9_\-]+$')


def _timestamp_for_filename(moment: datetime) -> str:
    return moment.isoformat().replace(":", "-").replace(".", "-")


class BloodReportPipeline:
    """
    Thin workflow around the extraction engine.
    """

    def __init__(
        self,
        upload_dir: Path,
        store: MarkerStore,
        processor: Optional[BloodReportProcessor] = None,
        text_source_factory: Callable[[Path], TextSource] = get_text_source,
        max_upload_bytes: int = base_settings.MAX_UPLOAD_BYTES,
        allowed_extensions: Iterable[str] = base_settings.ALLOWED_EXTENSIONS,
    ):
        self.upload_dir = Path(upload_dir)
        self.store = store
        self.processor = processor or BloodReportProcessor()
        self.text_source_factory = text_source_factory
        self.max_upload_bytes = max_upload_bytes
        self.allowed_extensions = tuple(ext.lower() for ext in allowed_extensions)

    @classmethod
    def from_settings(cls) -> "BloodReportPipeline":
        """Pipeline over the configured upload dir and marker database."""
        base_settings.create_directories()
        return cls(
            upload_dir=base_settings.UPLOAD_DIR,
            store=MarkerStore(base_settings.MARKER_DB_PATH),
        )

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------
    def save_upload(self, user_id: str, filename: str, content: bytes) -> Dict[str, Any]:
        """
        Validate and store an uploaded report.

        Raises:
            UploadValidationError: bad user id, extension or size
        """
        self._check_user_id(user_id)

        suffix = Path(filename or "").suffix.lower()
        if suffix not in self.allowed_extensions:
            raise UploadValidationError(
                f"Only {', '.join(self.allowed_extensions)} files are allowed"
            )
        if not content:
            raise UploadValidationError("Uploaded file is empty")
        if len(content) > self.max_upload_bytes:
            raise UploadValidationError(
                f"File size must be less than {self.max_upload_bytes // (1024 * 1024)}MB"
            )

        uploaded_at = datetime.now(timezone.utc)
        file_id = str(uuid.uuid4())
        file_name = f"{_timestamp_for_filename(uploaded_at)}_{file_id}{suffix}"

        user_dir = self.upload_dir / user_id
        user_dir.mkdir(parents=True, exist_ok=True)
        (user_dir / file_name).write_bytes(content)

        logger.info(f"File uploaded for {user_id}: {file_name} ({len(content)} bytes)")

        return {
            "success": True,
            "fileId": file_id,
            "fileName": file_name,
            "fileSize": len(content),
            "originalName": filename,
            "uploadedAt": uploaded_at.isoformat(),
        }

    def find_upload(self, user_id: str, file_id: str) -> Path:
        """
        Locate a stored upload.

        Raises:
            UploadNotFoundError: no such upload for this user
        """
        self._check_user_id(user_id)
        if not _SAFE_ID.match(file_id or ""):
            raise UploadNotFoundError(f"Unknown file id '{file_id}'")

        user_dir = self.upload_dir / user_id
        matches = sorted(user_dir.glob(f"*_{file_id}.*")) if user_dir.exists() else []
        if not matches:
            raise UploadNotFoundError(f"No upload {file_id} for user {user_id}")
        return matches[0]

    # ------------------------------------------------------------------
    # Process
    # ------------------------------------------------------------------
    def process_text(self, text: str) -> ExtractionResult:
        return self.processor.extract(text)

    @log_performance(logger, "Blood report processing")
    def process_upload(self, user_id: str, file_id: str) -> Dict[str, Any]:
        """
        Read an uploaded report and extract its blood parameters.

        Returns:
            {success, reportId, fileId, parameters, summary, processedAt}
        """
        path = self.find_upload(user_id, file_id)
        text = self.text_source_factory(path).read_text(path)
        result = self.process_text(text)

        return {
            "success": True,
            "reportId": str(uuid.uuid4()),
            "fileId": file_id,
            **result.to_dict(),
            "processedAt": datetime.now(timezone.utc).isoformat(),
        }

    # ------------------------------------------------------------------
    # Confirm / fetch
    # ------------------------------------------------------------------
    def confirm(
        self,
        user_id: str,
        report_id: str,
        parameters: Optional[Mapping[str, Any]],
        report_date: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Persist user-confirmed parameters as the user's marker record.

        Raises:
            ConfirmationError: userId, reportId or parameters missing
        """
        if not user_id or not report_id or not parameters:
            raise ConfirmationError("userId, reportId, and parameters are required")

        record = build_marker_record(
            user_id=user_id,
            report_id=report_id,
            parameters=parameters,
            report_date=report_date,
        )
        self.store.save(record)

        return {
            "success": True,
            "userId": user_id,
            "reportId": report_id,
            "parameters": record["markers"],
            "reportDate": record["reportDate"],
            "confirmedAt": record["lastUpdated"],
            "message": "Blood parameters saved successfully",
        }

    def get_markers(self, user_id: str) -> Dict[str, Any]:
        record = self.store.get(user_id)
        if record is None:
            return {
                "markers": {},
                "lastUpdated": None,
                "message": "No blood markers found",
            }

        return {
            "markers": record.get("markers", {}),
            "lastUpdated": record.get("lastUpdated"),
            "source": record.get("source"),
            "reportDate": record.get("reportDate"),
            "reportId": record.get("reportId"),
        }

    @staticmethod
    def _check_user_id(user_id: str) -> None:
        if not user_id or not _SAFE_ID.match(user_id):
            raise UploadValidationError("A valid userId is required")
