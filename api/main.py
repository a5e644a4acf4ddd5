# ============================================================================
# api/main.py
# ============================================================================
"""
FastAPI Backend for Blood Report Extraction

Runs on port 8000.
Upload a blood report, extract its parameters, confirm them, and read back
a user's confirmed blood markers.
"""

import sys
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bloodwork.config import logging_settings
from bloodwork.core.pipeline import BloodReportPipeline
from bloodwork.utils.exceptions import (
    BloodworkError,
    ConfirmationError,
    TextExtractionError,
    UnsupportedFileTypeError,
    UploadNotFoundError,
    UploadValidationError,
)
from bloodwork.utils.logging import setup_logging

logger = logging.getLogger(__name__)


# ============================================================================
# Models
# ============================================================================

class ProcessRequest(BaseModel):
    userId: str
    fileId: str


class ExtractTextRequest(BaseModel):
    text: str


class ConfirmRequest(BaseModel):
    userId: Optional[str] = None
    reportId: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None
    reportDate: Optional[str] = Field(default=None, description="ISO-8601 date of the blood draw")


# ============================================================================
# App
# ============================================================================

def get_pipeline(request: Request) -> BloodReportPipeline:
    return request.app.state.pipeline


def create_app(pipeline: Optional[BloodReportPipeline] = None) -> FastAPI:
    """
    Build the API around a pipeline.

    Args:
        pipeline: Injected pipeline (tests); defaults to one built from settings
    """
    app = FastAPI(
        title="Blood Report Extraction API",
        description="Extract blood parameters from lab reports and keep confirmed markers",
        version="0.1.0",
    )
    app.state.pipeline = pipeline or BloodReportPipeline.from_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",  # Vite dev server
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ========================================================================
    # Endpoints
    # ========================================================================

    @app.get("/api/health")
    async def health():
        """Health check for monitoring."""
        return {"status": "healthy"}

    @app.post("/api/blood-report/upload")
    async def upload_report(
        file: UploadFile = File(...),
        userId: str = Form(...),
        pipeline: BloodReportPipeline = Depends(get_pipeline),
    ):
        """Store an uploaded blood report (PDF or text) for later processing."""
        content = await file.read()
        try:
            return pipeline.save_upload(userId, file.filename, content)
        except UploadValidationError as e:
            logger.warning(f"Upload rejected for {userId}: {e}")
            raise HTTPException(status_code=400, detail=str(e))

    @app.post("/api/blood-report/process")
    def process_report(
        request: ProcessRequest,
        pipeline: BloodReportPipeline = Depends(get_pipeline),
    ):
        """Extract blood parameters from a previously uploaded report."""
        try:
            return pipeline.process_upload(request.userId, request.fileId)
        except UploadNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except (UploadValidationError, UnsupportedFileTypeError) as e:
            raise HTTPException(status_code=400, detail=str(e))
        except TextExtractionError as e:
            logger.error(f"Text extraction failed for {request.fileId}: {e}")
            raise HTTPException(status_code=422, detail=str(e))

    @app.post("/api/blood-report/extract-text")
    def extract_text(
        request: ExtractTextRequest,
        pipeline: BloodReportPipeline = Depends(get_pipeline),
    ):
        """Extract blood parameters from already-extracted report text."""
        return pipeline.process_text(request.text).to_dict()

    @app.post("/api/blood-report/confirm")
    def confirm_report(
        request: ConfirmRequest,
        pipeline: BloodReportPipeline = Depends(get_pipeline),
    ):
        """Save user-confirmed parameters as the user's blood markers."""
        try:
            return pipeline.confirm(
                user_id=request.userId,
                report_id=request.reportId,
                parameters=request.parameters,
                report_date=request.reportDate,
            )
        except ConfirmationError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except BloodworkError as e:
            logger.error(f"Confirmation failed for {request.userId}: {e}")
            raise HTTPException(status_code=500, detail=f"Confirmation failed: {e}")

    @app.get("/api/blood-markers/{user_id}")
    def get_blood_markers(
        user_id: str,
        pipeline: BloodReportPipeline = Depends(get_pipeline),
    ):
        """Latest confirmed blood markers for a user."""
        logger.info(f"Fetching blood markers for user: {user_id}")
        try:
            return pipeline.get_markers(user_id)
        except BloodworkError as e:
            logger.error(f"Retrieval error for {user_id}: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to fetch blood markers: {e}")

    return app


if __name__ == "__main__":
    import uvicorn

    setup_logging(
        logging_settings.LOG_LEVEL,
        log_file=logging_settings.LOG_FILE,
        format_json=logging_settings.LOG_JSON,
    )
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
