"""Candidate API endpoints"""

from fastapi import APIRouter, Depends, Query

from resumeai.api.dependencies import get_candidate_repository, get_notification_center
from resumeai.core.exceptions import NotFoundException, ValidationException
from resumeai.core.logging import get_logger
from resumeai.models.candidate import CandidateStatus
from resumeai.repositories.candidate_repository import CandidateRepository, SortKey
from resumeai.schemas.candidate import (
    CandidateListResponse,
    CandidateResponse,
    StatusUpdateRequest,
)
from resumeai.services.notification_service import NotificationCenter

logger = get_logger(__name__)

router = APIRouter()

STATUS_FILTER_ALL = "all"


@router.get("", response_model=CandidateListResponse)
async def list_candidates(
    search: str = Query("", description="Case-insensitive match on name, email or position"),
    status: str = Query(STATUS_FILTER_ALL, description="Status to keep, or 'all'"),
    sort_by: SortKey = Query(SortKey.SCORE, description="score, name or date"),
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """
    Search and list candidates

    **Query Parameters:**
    - search: Text matched against name, email and position
    - status: pending, reviewing, shortlisted, rejected or all (default)
    - sort_by: score (highest first, default), name (A-Z) or date (newest first)
    """
    status_filter = None
    if status.strip().lower() != STATUS_FILTER_ALL:
        try:
            status_filter = CandidateStatus(status)
        except ValueError:
            raise ValidationException(
                f"Unknown status filter: {status}",
                details={"allowed": [STATUS_FILTER_ALL] + [s.value for s in CandidateStatus]}
            )

    candidates = candidate_repo.search(query=search, status=status_filter, sort_by=sort_by)

    return CandidateListResponse(
        candidates=[CandidateResponse.from_candidate(c) for c in candidates],
        total=candidate_repo.count(),
        matched=len(candidates),
    )


@router.get("/{candidate_id}", response_model=CandidateResponse)
async def get_candidate(
    candidate_id: int,
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """Get a single candidate"""
    candidate = candidate_repo.get_by_id(candidate_id)

    if not candidate:
        raise NotFoundException(
            f"Candidate not found: {candidate_id}",
            details={"candidate_id": candidate_id}
        )

    return CandidateResponse.from_candidate(candidate)


@router.patch("/{candidate_id}/status", response_model=CandidateResponse)
async def update_candidate_status(
    candidate_id: int,
    request: StatusUpdateRequest,
    candidate_repo: CandidateRepository = Depends(get_candidate_repository),
    notifications: NotificationCenter = Depends(get_notification_center)
):
    """
    Move a candidate to another review status

    Any status may move to any other status. The candidate keeps its position
    in the listing order.
    """
    candidate = candidate_repo.update_status(candidate_id, request.status)

    if not candidate:
        notifications.error("Candidate not found")
        raise NotFoundException(
            f"Candidate not found: {candidate_id}",
            details={"candidate_id": candidate_id}
        )

    notifications.success(f"{candidate.name} marked as {candidate.status.value}")
    return CandidateResponse.from_candidate(candidate)
