"""Data access layer"""

from resumeai.repositories.candidate_repository import (
    CandidateRepository,
    SortKey,
    filter_candidates,
    sort_candidates,
)
from resumeai.repositories.seed_data import seed_candidates

__all__ = [
    'CandidateRepository',
    'SortKey',
    'filter_candidates',
    'sort_candidates',
    'seed_candidates',
]
