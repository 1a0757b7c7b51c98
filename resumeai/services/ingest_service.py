"""Resume ingest workflow: validation and simulated analysis"""

import asyncio
import enum
from datetime import date
from typing import Optional

from resumeai.core.config import Settings, settings as default_settings
from resumeai.core.exceptions import (
    AnalysisFailedException,
    AnalysisInProgressException,
    ValidationException,
)
from resumeai.core.logging import get_logger
from resumeai.models.candidate import Candidate, CandidateStatus
from resumeai.repositories.candidate_repository import CandidateRepository
from resumeai.schemas.candidate import CandidateResponse
from resumeai.schemas.resume import AnalysisResult, IngestStatusResponse, ResumeSubmission
from resumeai.services.analysis_provider import AnalysisProvider
from resumeai.services.notification_service import NotificationCenter

logger = get_logger(__name__)


class IngestState(str, enum.Enum):
    """Analysis workflow state"""
    IDLE = "idle"
    ANALYZING = "analyzing"
    COMPLETE = "complete"


class IngestService:
    """
    Owns the single in-flight resume analysis

    The workflow moves Idle -> Analyzing -> Complete -> Idle. Only one
    analysis may be in flight; the delays are modelled by one asyncio task
    that ``shutdown`` cancels.
    """

    def __init__(
        self,
        candidate_repository: CandidateRepository,
        analysis_provider: AnalysisProvider,
        notifications: NotificationCenter,
        config: Optional[Settings] = None
    ):
        """
        Initialize ingest service

        Args:
            candidate_repository: Store receiving analyzed candidates
            analysis_provider: Produces the analysis result
            notifications: Sink for user-facing messages
            config: Settings providing delays and accepted media types
        """
        config = config or default_settings
        self.candidate_repo = candidate_repository
        self.analysis_provider = analysis_provider
        self.notifications = notifications
        self.analysis_delay = config.ANALYSIS_DELAY_SECONDS
        self.reset_delay = config.RESET_DELAY_SECONDS
        self.allowed_content_types = set(config.ALLOWED_CONTENT_TYPES)

        self.state = IngestState.IDLE
        self.submission: Optional[ResumeSubmission] = None
        self.last_result: Optional[AnalysisResult] = None
        self.last_candidate: Optional[Candidate] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def task(self) -> Optional[asyncio.Task]:
        """The scheduled analysis task, if any"""
        return self._task

    def start_analysis(self, submission: ResumeSubmission) -> IngestState:
        """
        Validate a submission and schedule its analysis

        Must be called from within a running event loop. Validation happens
        synchronously; nothing is scheduled when it fails.

        Args:
            submission: Upload form contents

        Returns:
            The new state (always ANALYZING)

        Raises:
            AnalysisInProgressException: If the workflow is not idle
            ValidationException: If the file or job description is missing or invalid
        """
        if self.state != IngestState.IDLE:
            logger.warning(
                "Analysis rejected, workflow busy",
                extra={"state": self.state.value}
            )
            raise AnalysisInProgressException(self.state.value)

        self.validate(submission)

        self.submission = submission
        self.state = IngestState.ANALYZING
        self._task = asyncio.get_running_loop().create_task(
            self._run(submission),
            name="resume_analysis"
        )

        logger.info(
            f"Started analysis of {submission.file.filename}",
            extra={"state": self.state.value}
        )
        return self.state

    def validate(self, submission: ResumeSubmission) -> None:
        """
        Check the upload form, notifying the user of the outcome

        Raises:
            ValidationException: On missing file, unsupported media type or
                blank job description
        """
        if submission.file is None:
            self.notifications.error("Please upload a resume first.")
            raise ValidationException("Resume file is required")

        if submission.file.content_type not in self.allowed_content_types:
            self.notifications.error("Please upload a PDF or Word document.")
            raise ValidationException(
                f"Unsupported file type: {submission.file.content_type}",
                details={
                    "filename": submission.file.filename,
                    "allowed_content_types": sorted(self.allowed_content_types),
                }
            )

        self.notifications.success("Resume uploaded successfully!")

        if not submission.job_description.strip():
            self.notifications.error("Please enter a job description.")
            raise ValidationException("Job description is required")

    async def _run(self, submission: ResumeSubmission) -> None:
        """Wait out the analysis delay, store the result, then auto-reset"""
        await asyncio.sleep(self.analysis_delay)

        try:
            candidate = self._complete(submission)
        except Exception as e:
            logger.error(f"Resume analysis failed: {str(e)}", exc_info=True)
            self.notifications.error("Analysis failed. Please try again.")
            self._reset()
            return

        logger.info(
            f"Analysis complete for candidate {candidate.id}",
            extra={"candidate_id": candidate.id}
        )

        await asyncio.sleep(self.reset_delay)
        self._reset()

    def _complete(self, submission: ResumeSubmission) -> Candidate:
        try:
            result = self.analysis_provider.analyze(submission)
        except Exception as e:
            raise AnalysisFailedException(
                f"Analysis provider error: {str(e)}",
                details={"filename": submission.file.filename if submission.file else None}
            ) from e

        candidate = Candidate(
            id=self.candidate_repo.generate_id(),
            name=result.name,
            email=result.email,
            position=result.position,
            score=result.score,
            skills=result.skills,
            experience=result.experience,
            status=CandidateStatus.PENDING,
            upload_date=date.today(),
            strengths=result.strengths,
            improvements=result.improvements,
        )
        self.candidate_repo.add(candidate)

        self.last_result = result
        self.last_candidate = candidate
        self.state = IngestState.COMPLETE
        self.notifications.success("Resume analyzed successfully!")
        return candidate

    def status(self) -> IngestStatusResponse:
        """Snapshot of the workflow: state, form in flight and last outcome"""
        last_candidate = self.last_candidate
        return IngestStatusResponse(
            state=self.state.value,
            submission=self.submission,
            last_result=self.last_result,
            last_candidate=CandidateResponse.from_candidate(last_candidate) if last_candidate else None,
        )

    def _reset(self) -> None:
        """Clear the form and return to idle"""
        self.submission = None
        self.state = IngestState.IDLE
        self._task = None

    async def shutdown(self) -> None:
        """Cancel any pending analysis so it cannot touch the store afterwards"""
        task = self._task
        if task is not None and not task.done():
            logger.info("Cancelling pending resume analysis")
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        self._reset()
