"""Analytics schemas"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from resumeai.schemas.candidate import CandidateResponse


class ScoreBucket(BaseModel):
    """Histogram bin over candidate scores"""
    range: str = Field(..., description="Bin label, e.g. '80-89'")
    count: int = Field(..., ge=0)


class SkillCount(BaseModel):
    """Skill frequency across all candidates"""
    skill: str
    count: int = Field(..., ge=1)


class Insights(BaseModel):
    """Derived observations about the candidate pool"""
    high_score_percent: int = Field(..., description="Share of candidates scoring 80 or more")
    top_skill: Optional[str] = Field(None, description="Most frequent skill")
    top_skill_percent: int = Field(0, description="Share of resumes listing the top skill")
    score_distribution: str
    skill_trends: str
    recommendation: str


class AnalyticsReport(BaseModel):
    """Summary statistics over the full candidate collection"""
    total: int
    shortlisted_count: int
    shortlisted_percent: int
    rejection_rate_percent: int
    average_score: int
    score_histogram: List[ScoreBucket]
    status_distribution: Dict[str, int]
    top_skills: List[SkillCount]
    insights: Insights


class DashboardSummary(BaseModel):
    """Headline numbers for the dashboard landing view"""
    total_resumes: int
    shortlisted: int
    average_score: int
    active_positions: int
    recent_candidates: List[CandidateResponse]
