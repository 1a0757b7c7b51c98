"""Fixed candidates loaded into a fresh store"""

from datetime import date
from typing import List

from resumeai.models.candidate import Candidate, CandidateStatus


def seed_candidates() -> List[Candidate]:
    """Return the demo candidates, most recent first"""
    return [
        Candidate(
            id=1,
            name="John Smith",
            email="john.smith@email.com",
            position="Frontend Developer",
            score=92,
            skills=["React", "TypeScript", "CSS"],
            experience="5 years",
            status=CandidateStatus.SHORTLISTED,
            upload_date=date(2024, 1, 15),
        ),
        Candidate(
            id=2,
            name="Sarah Johnson",
            email="sarah.j@email.com",
            position="Full Stack Developer",
            score=87,
            skills=["Node.js", "Python", "PostgreSQL"],
            experience="3 years",
            status=CandidateStatus.REVIEWING,
            upload_date=date(2024, 1, 14),
        ),
        Candidate(
            id=3,
            name="Mike Chen",
            email="mike.chen@email.com",
            position="UI/UX Designer",
            score=78,
            skills=["Figma", "Adobe Creative Suite", "User Research"],
            experience="4 years",
            status=CandidateStatus.PENDING,
            upload_date=date(2024, 1, 13),
        ),
    ]
