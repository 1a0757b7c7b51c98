"""Analytics aggregation over the candidate collection

Every function here is a pure reduction of a candidate sequence; none of them
touch the repository.
"""

import math
from collections import Counter
from typing import Dict, List, Sequence, Tuple

from resumeai.models.candidate import Candidate, CandidateStatus
from resumeai.schemas.analytics import (
    AnalyticsReport,
    DashboardSummary,
    Insights,
    ScoreBucket,
    SkillCount,
)
from resumeai.schemas.candidate import CandidateResponse

# (label, inclusive lower bound, inclusive upper bound)
SCORE_BINS: Tuple[Tuple[str, int, int], ...] = (
    ("90-100", 90, 100),
    ("80-89", 80, 89),
    ("70-79", 70, 79),
    ("60-69", 60, 69),
    ("Below 60", 0, 59),
)

HIGH_SCORE_THRESHOLD = 80
TOP_SKILLS_LIMIT = 10
RECENT_CANDIDATES_LIMIT = 3


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negatives"""
    return int(math.floor(value + 0.5))


def percentage(part: int, total: int) -> int:
    """Whole-number percentage of ``part`` in ``total``; 0 for an empty total"""
    if total == 0:
        return 0
    return round_half_up(part / total * 100)


def average_score(candidates: Sequence[Candidate]) -> int:
    """Rounded mean score; 0 for an empty collection"""
    if not candidates:
        return 0
    return round_half_up(sum(c.score for c in candidates) / len(candidates))


def score_histogram(candidates: Sequence[Candidate]) -> List[ScoreBucket]:
    """Count candidates per fixed score bin"""
    counts = {label: 0 for label, _, _ in SCORE_BINS}
    for candidate in candidates:
        for label, low, high in SCORE_BINS:
            if low <= candidate.score <= high:
                counts[label] += 1
                break
    return [ScoreBucket(range=label, count=counts[label]) for label, _, _ in SCORE_BINS]


def status_distribution(candidates: Sequence[Candidate]) -> Dict[str, int]:
    """Count candidates per status; every status is present"""
    distribution = {status.value: 0 for status in CandidateStatus}
    for candidate in candidates:
        distribution[candidate.status.value] += 1
    return distribution


def top_skills(candidates: Sequence[Candidate], limit: int = TOP_SKILLS_LIMIT) -> List[SkillCount]:
    """Most frequent skills, ties in first-seen order"""
    counter: Counter = Counter()
    for candidate in candidates:
        counter.update(candidate.skills)
    return [SkillCount(skill=skill, count=count) for skill, count in counter.most_common(limit)]


def build_insights(
    candidates: Sequence[Candidate],
    skills: List[SkillCount],
    rejection_rate: int
) -> Insights:
    """Templated observations backed by the computed numbers"""
    total = len(candidates)
    high_scorers = sum(1 for c in candidates if c.score >= HIGH_SCORE_THRESHOLD)
    high_score_percent = percentage(high_scorers, total)

    if skills:
        top_skill = skills[0].skill
        top_skill_percent = percentage(skills[0].count, total)
        skill_trends = (
            f"{top_skill} is the most common skill, appearing in "
            f"{top_skill_percent}% of resumes."
        )
    else:
        top_skill = None
        top_skill_percent = 0
        skill_trends = "No skills have been extracted yet."

    return Insights(
        high_score_percent=high_score_percent,
        top_skill=top_skill,
        top_skill_percent=top_skill_percent,
        score_distribution=(
            f"{high_score_percent}% of candidates scored {HIGH_SCORE_THRESHOLD} or above."
        ),
        skill_trends=skill_trends,
        recommendation=(
            f"Consider adjusting scoring criteria based on the {rejection_rate}% "
            f"rejection rate to optimize candidate selection."
        ),
    )


def build_analytics_report(candidates: Sequence[Candidate]) -> AnalyticsReport:
    """
    Aggregate the full candidate collection

    Args:
        candidates: Every candidate in the store

    Returns:
        Analytics report; percentages and averages are 0 for an empty collection
    """
    total = len(candidates)
    distribution = status_distribution(candidates)
    shortlisted = distribution[CandidateStatus.SHORTLISTED.value]
    rejection_rate = percentage(distribution[CandidateStatus.REJECTED.value], total)
    skills = top_skills(candidates)

    return AnalyticsReport(
        total=total,
        shortlisted_count=shortlisted,
        shortlisted_percent=percentage(shortlisted, total),
        rejection_rate_percent=rejection_rate,
        average_score=average_score(candidates),
        score_histogram=score_histogram(candidates),
        status_distribution=distribution,
        top_skills=skills,
        insights=build_insights(candidates, skills, rejection_rate),
    )


def build_dashboard_summary(
    candidates: Sequence[Candidate],
    recent: Sequence[Candidate]
) -> DashboardSummary:
    """
    Headline numbers and recent activity for the landing view

    Args:
        candidates: Every candidate in the store
        recent: Latest additions, newest first
    """
    return DashboardSummary(
        total_resumes=len(candidates),
        shortlisted=sum(1 for c in candidates if c.status == CandidateStatus.SHORTLISTED),
        average_score=average_score(candidates),
        active_positions=len({c.position.strip().lower() for c in candidates}),
        recent_candidates=[
            CandidateResponse.from_candidate(c)
            for c in recent
        ],
    )
