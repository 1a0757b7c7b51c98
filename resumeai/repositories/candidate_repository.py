"""In-memory candidate repository"""

import enum
import time
from typing import Iterable, List, Optional, Sequence

from resumeai.models.candidate import Candidate, CandidateStatus
from resumeai.core.exceptions import ConflictException
from resumeai.core.logging import get_logger

logger = get_logger(__name__)


class SortKey(str, enum.Enum):
    """Supported orderings for candidate listings"""
    SCORE = "score"
    NAME = "name"
    DATE = "date"


def filter_candidates(
    candidates: Sequence[Candidate],
    search: str = "",
    status: Optional[CandidateStatus] = None
) -> List[Candidate]:
    """
    Filter candidates by free-text search and status

    Args:
        candidates: Candidates to filter (left untouched)
        search: Case-insensitive substring matched against name, email or position
        status: Exact status to keep; None keeps every status

    Returns:
        New list of matching candidates in their original order
    """
    term = (search or "").lower()

    def matches(candidate: Candidate) -> bool:
        if status is not None and candidate.status != status:
            return False
        if not term:
            return True
        return (
            term in candidate.name.lower()
            or term in candidate.email.lower()
            or term in candidate.position.lower()
        )

    return [candidate for candidate in candidates if matches(candidate)]


def sort_candidates(
    candidates: Sequence[Candidate],
    sort_by: SortKey = SortKey.SCORE
) -> List[Candidate]:
    """
    Sort candidates into a new list

    Score and date sort descending, name sorts ascending. Ties keep their
    original relative order.
    """
    sort_by = SortKey(sort_by)

    if sort_by == SortKey.SCORE:
        return sorted(candidates, key=lambda c: c.score, reverse=True)
    if sort_by == SortKey.NAME:
        return sorted(candidates, key=lambda c: c.name.casefold())
    return sorted(candidates, key=lambda c: c.upload_date, reverse=True)


class CandidateRepository:
    """Ordered in-memory store of candidates, most recent first"""

    def __init__(self, candidates: Optional[Iterable[Candidate]] = None):
        """
        Initialize repository

        Args:
            candidates: Initial records, already ordered most recent first
        """
        self._candidates: List[Candidate] = []
        self._last_id = 0

        for candidate in candidates or []:
            if self.get_by_id(candidate.id) is not None:
                raise ConflictException(
                    f"Duplicate candidate id in initial data: {candidate.id}",
                    details={"candidate_id": candidate.id}
                )
            self._candidates.append(candidate)
            self._last_id = max(self._last_id, candidate.id)

    def generate_id(self) -> int:
        """
        Issue a new candidate id

        Ids are derived from the current time in milliseconds and are strictly
        increasing, even when called twice within the same millisecond.
        """
        candidate_id = time.time_ns() // 1_000_000
        if candidate_id <= self._last_id:
            candidate_id = self._last_id + 1
        self._last_id = candidate_id
        return candidate_id

    def list_all(self) -> List[Candidate]:
        """Snapshot of all candidates"""
        return list(self._candidates)

    def get_by_id(self, candidate_id: int) -> Optional[Candidate]:
        """
        Get candidate by ID

        Args:
            candidate_id: Candidate id

        Returns:
            Candidate if found, None otherwise
        """
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                return candidate
        return None

    def count(self) -> int:
        """Number of stored candidates"""
        return len(self._candidates)

    def recent(self, limit: int = 3) -> List[Candidate]:
        """Most recently added candidates"""
        return self._candidates[:limit]

    def add(self, candidate: Candidate) -> Candidate:
        """
        Prepend a candidate to the store

        Args:
            candidate: Candidate to add

        Returns:
            The stored candidate

        Raises:
            ConflictException: If a candidate with the same id already exists
        """
        if self.get_by_id(candidate.id) is not None:
            raise ConflictException(
                f"Candidate already exists: {candidate.id}",
                details={"candidate_id": candidate.id}
            )

        self._candidates.insert(0, candidate)
        self._last_id = max(self._last_id, candidate.id)

        logger.info(f"Added candidate: {candidate.id}", extra={"candidate_id": candidate.id})
        return candidate

    def update_status(
        self,
        candidate_id: int,
        new_status: CandidateStatus
    ) -> Optional[Candidate]:
        """
        Change the status of a candidate, keeping its position

        Args:
            candidate_id: Candidate id
            new_status: Status to apply

        Returns:
            Updated candidate, or None if no candidate has this id
        """
        new_status = CandidateStatus(new_status)

        for index, candidate in enumerate(self._candidates):
            if candidate.id == candidate_id:
                updated = candidate.with_status(new_status)
                self._candidates[index] = updated
                logger.info(
                    f"Updated candidate {candidate_id} status: "
                    f"{candidate.status.value} -> {new_status.value}",
                    extra={"candidate_id": candidate_id, "status": new_status.value}
                )
                return updated

        logger.warning(
            f"Status update ignored, candidate not found: {candidate_id}",
            extra={"candidate_id": candidate_id}
        )
        return None

    def search(
        self,
        query: str = "",
        status: Optional[CandidateStatus] = None,
        sort_by: SortKey = SortKey.SCORE
    ) -> List[Candidate]:
        """
        Search candidates with filters

        Args:
            query: Text search query (name, email and position)
            status: Status filter, None for all
            sort_by: Ordering of the result

        Returns:
            List of matching candidates
        """
        results = sort_candidates(
            filter_candidates(self._candidates, query, status),
            sort_by
        )
        logger.debug(f"Search returned {len(results)} candidates")
        return results
