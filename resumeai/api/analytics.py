"""Analytics API endpoints"""

from fastapi import APIRouter, Depends

from resumeai.api.dependencies import get_candidate_repository
from resumeai.repositories.candidate_repository import CandidateRepository
from resumeai.schemas.analytics import AnalyticsReport, DashboardSummary
from resumeai.services.analytics_service import (
    RECENT_CANDIDATES_LIMIT,
    build_analytics_report,
    build_dashboard_summary,
)

router = APIRouter()


@router.get("", response_model=AnalyticsReport)
async def get_analytics(
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """
    Aggregate statistics over every candidate

    **Returns:**
    - totals, shortlisted share, rejection rate and average score
    - score histogram (90-100, 80-89, 70-79, 60-69, Below 60)
    - count per status
    - ten most frequent skills
    - derived insights
    """
    return build_analytics_report(candidate_repo.list_all())


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(
    candidate_repo: CandidateRepository = Depends(get_candidate_repository)
):
    """Headline numbers and the three most recent candidates"""
    return build_dashboard_summary(
        candidate_repo.list_all(),
        recent=candidate_repo.recent(RECENT_CANDIDATES_LIMIT)
    )
