"""Domain models"""

from resumeai.models.candidate import Candidate, CandidateStatus
from resumeai.models.notification import Notification, NotificationLevel

__all__ = [
    "Candidate",
    "CandidateStatus",
    "Notification",
    "NotificationLevel",
]
