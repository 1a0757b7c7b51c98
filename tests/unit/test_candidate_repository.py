"""Unit tests for the candidate store"""

import pytest
from datetime import date
from pydantic import ValidationError

from resumeai.core.exceptions import ConflictException
from resumeai.models.candidate import CandidateStatus
from resumeai.repositories.candidate_repository import (
    CandidateRepository,
    SortKey,
    filter_candidates,
    sort_candidates,
)
from tests.factories import make_candidate


class TestCandidateRepository:
    """Test cases for CandidateRepository"""

    def test_seed_order_is_most_recent_first(self, repository):
        names = [c.name for c in repository.list_all()]
        assert names == ["John Smith", "Sarah Johnson", "Mike Chen"]

    def test_list_all_returns_snapshot(self, repository):
        snapshot = repository.list_all()
        snapshot.clear()
        assert repository.count() == 3

    def test_add_prepends(self, repository):
        candidate = make_candidate(100, name="New Person")

        repository.add(candidate)

        assert repository.count() == 4
        assert repository.list_all()[0] == candidate

    def test_records_are_immutable_after_status_change(self, repository):
        original = repository.get_by_id(1)

        updated = repository.update_status(1, CandidateStatus.REJECTED)

        assert isinstance(updated.skills, tuple)
        assert updated.skills == original.skills == ("React", "TypeScript", "CSS")
        with pytest.raises(ValidationError):
            updated.status = CandidateStatus.PENDING
        with pytest.raises(AttributeError):
            updated.skills.append("Go")
        assert original.status == CandidateStatus.SHORTLISTED

    def test_add_duplicate_id_raises(self, repository):
        with pytest.raises(ConflictException):
            repository.add(make_candidate(1))

        assert repository.count() == 3

    def test_initial_duplicates_rejected(self):
        with pytest.raises(ConflictException):
            CandidateRepository([make_candidate(7), make_candidate(7)])

    def test_update_status_replaces_record_in_place(self, repository):
        before = repository.list_all()

        updated = repository.update_status(3, CandidateStatus.SHORTLISTED)

        after = repository.list_all()
        assert updated.status == CandidateStatus.SHORTLISTED
        assert after[2] is updated
        assert [c.id for c in after] == [c.id for c in before]
        assert updated.model_dump(exclude={"status"}) == before[2].model_dump(exclude={"status"})
        # The earlier snapshot still holds the old record
        assert before[2].status == CandidateStatus.PENDING

    def test_update_status_any_transition_allowed(self, repository):
        repository.update_status(1, CandidateStatus.REJECTED)
        repository.update_status(1, CandidateStatus.PENDING)

        assert repository.get_by_id(1).status == CandidateStatus.PENDING

    def test_update_status_accepts_plain_string(self, repository):
        updated = repository.update_status(2, "Rejected")
        assert updated.status == CandidateStatus.REJECTED

    def test_update_status_unknown_id_is_noop(self, repository, caplog):
        before = [c.model_dump() for c in repository.list_all()]

        result = repository.update_status(999, CandidateStatus.REJECTED)

        assert result is None
        assert [c.model_dump() for c in repository.list_all()] == before
        assert "candidate not found: 999" in caplog.text

    def test_generate_id_is_strictly_increasing(self, repository):
        ids = [repository.generate_id() for _ in range(50)]
        assert ids == sorted(set(ids))
        assert ids[0] > 3

    def test_generate_id_stays_above_stored_ids(self):
        far_future = 10 ** 15
        repo = CandidateRepository([make_candidate(far_future)])
        assert repo.generate_id() == far_future + 1

    def test_recent(self, repository):
        assert [c.id for c in repository.recent(2)] == [1, 2]

    def test_get_by_id_missing(self, repository):
        assert repository.get_by_id(42) is None

    def test_search_composes_filter_and_sort(self, repository):
        results = repository.search(query="developer", sort_by=SortKey.NAME)
        assert [c.name for c in results] == ["John Smith", "Sarah Johnson"]


class TestFilterCandidates:
    """Test cases for filter_candidates"""

    def test_search_is_case_insensitive(self, repository):
        results = filter_candidates(repository.list_all(), search="sarah")
        assert [c.name for c in results] == ["Sarah Johnson"]

    def test_search_matches_email_and_position(self, repository):
        assert [c.id for c in filter_candidates(repository.list_all(), "mike.chen@")] == [3]
        assert [c.id for c in filter_candidates(repository.list_all(), "UI/UX")] == [3]

    def test_empty_search_matches_all(self, repository):
        assert len(filter_candidates(repository.list_all(), "")) == 3

    def test_status_filter(self, repository):
        results = filter_candidates(repository.list_all(), status=CandidateStatus.REVIEWING)
        assert [c.id for c in results] == [2]

    def test_search_and_status_combined(self, repository):
        results = filter_candidates(
            repository.list_all(), search="john", status=CandidateStatus.SHORTLISTED
        )
        # "john" also matches Sarah Johnson, who is reviewing
        assert [c.id for c in results] == [1]

    def test_does_not_mutate_input(self, repository):
        source = repository.list_all()
        copy = list(source)

        filter_candidates(source, search="zzz")

        assert source == copy


class TestSortCandidates:
    """Test cases for sort_candidates"""

    @pytest.fixture
    def candidates(self):
        return [
            make_candidate(1, name="bob", score=70, upload_date=date(2024, 3, 1)),
            make_candidate(2, name="Alice", score=95, upload_date=date(2024, 1, 1)),
            make_candidate(3, name="carol", score=85, upload_date=date(2024, 5, 1)),
        ]

    def test_sort_by_score_descending(self, candidates):
        assert [c.id for c in sort_candidates(candidates, SortKey.SCORE)] == [2, 3, 1]

    def test_sort_by_name_ascending_ignores_case(self, candidates):
        assert [c.name for c in sort_candidates(candidates, SortKey.NAME)] == ["Alice", "bob", "carol"]

    def test_sort_by_date_descending(self, candidates):
        assert [c.id for c in sort_candidates(candidates, SortKey.DATE)] == [3, 1, 2]

    def test_sort_accepts_string_key(self, candidates):
        assert [c.id for c in sort_candidates(candidates, "score")] == [2, 3, 1]

    def test_ties_keep_original_order(self):
        tied = [make_candidate(i, score=80) for i in (5, 3, 9)]
        assert [c.id for c in sort_candidates(tied, SortKey.SCORE)] == [5, 3, 9]

    def test_does_not_mutate_input(self, candidates):
        copy = list(candidates)
        sort_candidates(candidates, SortKey.NAME)
        assert candidates == copy
