"""Candidate schemas for API requests and responses"""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resumeai.models.candidate import Candidate, CandidateStatus


class CandidateResponse(BaseModel):
    """Response schema for a single candidate"""
    id: int = Field(..., description="Unique candidate identifier")
    name: str
    email: str
    position: str
    score: int = Field(..., ge=0, le=100, description="Screening score between 0 and 100")
    skills: List[str]
    experience: str
    status: CandidateStatus
    upload_date: date
    strengths: List[str] = Field(default_factory=list, description="Highlights from the resume analysis")
    improvements: List[str] = Field(default_factory=list, description="Suggested areas for improvement")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 2,
                "name": "Sarah Johnson",
                "email": "sarah.j@email.com",
                "position": "Full Stack Developer",
                "score": 87,
                "skills": ["Node.js", "Python", "PostgreSQL"],
                "experience": "3 years",
                "status": "reviewing",
                "upload_date": "2024-01-14",
                "strengths": [],
                "improvements": []
            }
        }
    )

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> "CandidateResponse":
        """Create response from Candidate model"""
        return cls(**candidate.model_dump())


class CandidateListResponse(BaseModel):
    """Response schema for candidate listings"""
    candidates: List[CandidateResponse]
    total: int = Field(..., description="Number of candidates in the store")
    matched: int = Field(..., description="Number of candidates matching the filters")


class StatusUpdateRequest(BaseModel):
    """Request schema for a status transition"""
    status: CandidateStatus = Field(..., description="New review status")

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        if isinstance(value, str):
            try:
                return CandidateStatus(value)
            except ValueError:
                # Left for the enum validator to reject
                return value
        return value

    model_config = ConfigDict(
        json_schema_extra={"example": {"status": "shortlisted"}}
    )
