"""Notification schemas"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from resumeai.models.notification import NotificationLevel


class NotificationResponse(BaseModel):
    """Response schema for a notification"""
    id: int
    level: NotificationLevel
    message: str
    created_at: datetime


class NotificationListResponse(BaseModel):
    """Recent notifications, newest first"""
    notifications: List[NotificationResponse] = Field(default_factory=list)
