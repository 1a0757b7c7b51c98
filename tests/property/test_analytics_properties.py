"""Property-based tests for analytics aggregation"""

import pytest
from hypothesis import given, strategies as st, settings

from resumeai.models.candidate import CandidateStatus
from resumeai.services.analytics_service import SCORE_BINS, build_analytics_report
from tests.factories import make_candidate


scored_candidates = st.lists(
    st.tuples(
        st.integers(min_value=0, max_value=100),
        st.sampled_from(list(CandidateStatus)),
        st.lists(st.sampled_from(["Python", "SQL", "React", "Go", "Figma"]), max_size=5, unique=True),
    ),
    max_size=40,
).map(
    lambda rows: [
        make_candidate(index + 1, score=score, status=status, skills=skills)
        for index, (score, status, skills) in enumerate(rows)
    ]
)


# Property: histogram and status counts partition the collection
@pytest.mark.property
@settings(max_examples=100)
@given(candidates=scored_candidates)
def test_property_counts_partition_collection(candidates):
    """
    Property: histogram bins and status distribution both sum to total
    """
    report = build_analytics_report(candidates)

    assert report.total == len(candidates)
    assert sum(b.count for b in report.score_histogram) == report.total
    assert sum(report.status_distribution.values()) == report.total
    assert set(report.status_distribution) == {s.value for s in CandidateStatus}


# Property: every score lands in exactly one bin
@pytest.mark.property
@settings(max_examples=100)
@given(score=st.integers(min_value=0, max_value=100))
def test_property_bins_are_disjoint(score):
    """
    Property: score bins are mutually exclusive and exhaustive over 0-100
    """
    matching = [label for label, low, high in SCORE_BINS if low <= score <= high]
    assert len(matching) == 1

    report = build_analytics_report([make_candidate(1, score=score)])
    assert [b.range for b in report.score_histogram if b.count] == matching


# Property: percentages and averages stay in range
@pytest.mark.property
@settings(max_examples=100)
@given(candidates=scored_candidates)
def test_property_percentages_in_range(candidates):
    """
    Property: derived percentages lie in 0-100 and are 0 for an empty pool
    """
    report = build_analytics_report(candidates)

    for value in (
        report.rejection_rate_percent,
        report.shortlisted_percent,
        report.average_score,
        report.insights.high_score_percent,
        report.insights.top_skill_percent,
    ):
        assert 0 <= value <= 100

    if not candidates:
        assert report.average_score == 0
        assert report.rejection_rate_percent == 0
        assert report.top_skills == []
    else:
        scores = [c.score for c in candidates]
        assert min(scores) <= report.average_score <= max(scores)


# Property: top skills are sorted and bounded
@pytest.mark.property
@settings(max_examples=100)
@given(candidates=scored_candidates)
def test_property_top_skills_sorted(candidates):
    """
    Property: at most ten skills, counts non-increasing and exact
    """
    report = build_analytics_report(candidates)

    counts = [s.count for s in report.top_skills]
    assert len(counts) <= 10
    assert counts == sorted(counts, reverse=True)
    for entry in report.top_skills:
        assert entry.count == sum(c.skills.count(entry.skill) for c in candidates)
