"""Resume upload and analysis API endpoints"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from resumeai.api.dependencies import get_ingest_service
from resumeai.core.logging import get_logger
from resumeai.schemas.resume import IngestStatusResponse, ResumeSubmission, UploadedResume
from resumeai.services.ingest_service import IngestService

logger = get_logger(__name__)

router = APIRouter()


@router.post("/analyze", response_model=IngestStatusResponse, status_code=status.HTTP_202_ACCEPTED)
async def analyze_resume(
    file: Optional[UploadFile] = File(None),
    job_description: str = Form(""),
    position: str = Form(""),
    ingest_service: IngestService = Depends(get_ingest_service)
):
    """
    Upload a resume and start the simulated analysis

    **Requirements:**
    - File must be PDF, DOC or DOCX
    - Job description must not be blank
    - No other analysis may be in progress

    **Process:**
    1. Validates the form synchronously (400 on failure, nothing scheduled)
    2. Schedules the analysis and returns immediately
    3. After the analysis delay the candidate appears first in the listing
       with status "pending"
    4. The workflow resets to idle after a further delay

    Poll `/resumes/analysis` for progress.
    """
    uploaded = None
    if file is not None and file.filename:
        uploaded = UploadedResume(
            filename=file.filename,
            content_type=file.content_type,
            size=file.size,
        )

    logger.info(f"Resume analysis request: {uploaded.filename if uploaded else 'no file'}")

    submission = ResumeSubmission(
        file=uploaded,
        job_description=job_description,
        position=position,
    )
    ingest_service.start_analysis(submission)

    return ingest_service.status()


@router.get("/analysis", response_model=IngestStatusResponse)
async def get_analysis_status(
    ingest_service: IngestService = Depends(get_ingest_service)
):
    """Current state of the analysis workflow"""
    return ingest_service.status()
