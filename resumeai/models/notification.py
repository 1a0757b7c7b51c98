"""Notification model"""

import enum
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class NotificationLevel(str, enum.Enum):
    """Notification severity"""
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notification(BaseModel):
    """Transient user-facing message"""

    id: int
    level: NotificationLevel
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)
