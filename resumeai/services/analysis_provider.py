"""Resume analysis providers"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional

from resumeai.core.config import settings
from resumeai.schemas.resume import AnalysisResult, ResumeSubmission
from resumeai.core.logging import get_logger

logger = get_logger(__name__)


SKILL_VOCABULARY: List[str] = ["JavaScript", "React", "Node.js", "Python", "SQL"]

DEFAULT_STRENGTHS: List[str] = [
    "Strong technical background",
    "Excellent communication skills",
    "Relevant project experience",
]

DEFAULT_IMPROVEMENTS: List[str] = [
    "Could benefit from more leadership experience",
    "Consider additional certifications",
]


class AnalysisProvider(ABC):
    """Turns a resume submission into a candidate-shaped result"""

    @abstractmethod
    def analyze(self, submission: ResumeSubmission) -> AnalysisResult:
        """
        Analyze a resume submission

        Args:
            submission: Validated upload form

        Returns:
            Analysis result
        """


class RandomAnalysisProvider(AnalysisProvider):
    """
    Mock provider producing pseudo-random results

    Scores fall in 70-99, skills are 2 to 4 distinct entries of
    ``SKILL_VOCABULARY`` in vocabulary order. Pass ``seed`` for reproducible
    output.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        default_position: Optional[str] = None
    ):
        self.rng = random.Random(seed)
        self.default_position = default_position or settings.DEFAULT_POSITION

    def analyze(self, submission: ResumeSubmission) -> AnalysisResult:
        position = submission.position.strip() or self.default_position

        skill_count = self.rng.randint(2, 4)
        picked = set(self.rng.sample(SKILL_VOCABULARY, skill_count))
        skills = [skill for skill in SKILL_VOCABULARY if skill in picked]

        result = AnalysisResult(
            name=f"Candidate {self.rng.randint(0, 999)}",
            email=f"candidate{self.rng.randint(0, 999)}@email.com",
            position=position,
            score=self.rng.randint(70, 99),
            skills=skills,
            experience=f"{self.rng.randint(1, 8)} years",
            strengths=list(DEFAULT_STRENGTHS),
            improvements=list(DEFAULT_IMPROVEMENTS),
        )

        logger.debug(f"Mock analysis produced score {result.score} for {result.name}")
        return result
