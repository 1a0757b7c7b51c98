"""Candidate model"""

import enum
from datetime import date
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CandidateStatus(str, enum.Enum):
    """Review disposition of a candidate"""
    PENDING = "pending"
    REVIEWING = "reviewing"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"

    @classmethod
    def _missing_(cls, value: object) -> Optional["CandidateStatus"]:
        # Accept "Shortlisted", " REJECTED " and the like; anything else stays invalid
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class Candidate(BaseModel):
    """Screened resume submission.

    Records are immutable; a status change produces a new record via
    ``with_status`` which the repository swaps in place.
    """

    id: int
    name: str
    email: str
    position: str
    score: int = Field(ge=0, le=100)
    skills: Tuple[str, ...] = ()
    experience: str
    status: CandidateStatus = CandidateStatus.PENDING
    upload_date: date
    strengths: Tuple[str, ...] = ()
    improvements: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    def with_status(self, status: CandidateStatus) -> "Candidate":
        """Return a copy of this candidate carrying ``status``"""
        return self.model_copy(update={"status": status})

    def __repr__(self):
        return f"<Candidate(id={self.id}, name={self.name}, status={self.status.value})>"
