"""Resume submission and analysis schemas"""

from typing import List, Optional

from pydantic import BaseModel, Field

from resumeai.schemas.candidate import CandidateResponse


class UploadedResume(BaseModel):
    """Reference to an uploaded resume file"""
    filename: str
    content_type: Optional[str] = None
    size: Optional[int] = Field(None, ge=0)


class ResumeSubmission(BaseModel):
    """Everything the analysis needs from the upload form"""
    file: Optional[UploadedResume] = None
    job_description: str = ""
    position: str = ""


class AnalysisResult(BaseModel):
    """Candidate-shaped output of an analysis provider"""
    name: str
    email: str
    position: str
    score: int = Field(..., ge=0, le=100)
    skills: List[str]
    experience: str
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)


class IngestStatusResponse(BaseModel):
    """Current state of the resume analysis workflow"""
    state: str = Field(..., description="idle, analyzing or complete")
    submission: Optional[ResumeSubmission] = Field(
        None, description="Form fields of the analysis in flight"
    )
    last_result: Optional[AnalysisResult] = Field(
        None, description="Output of the most recent successful analysis"
    )
    last_candidate: Optional[CandidateResponse] = Field(
        None, description="Candidate created by the most recent successful analysis"
    )
