"""Notification API endpoints"""

from fastapi import APIRouter, Depends, Query, status

from resumeai.api.dependencies import get_notification_center
from resumeai.schemas.notification import NotificationListResponse, NotificationResponse
from resumeai.services.notification_service import NotificationCenter

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    limit: int = Query(20, description="Maximum number of notifications", ge=1, le=200),
    notifications: NotificationCenter = Depends(get_notification_center)
):
    """Recent notifications, newest first"""
    return NotificationListResponse(
        notifications=[
            NotificationResponse(**n.model_dump())
            for n in notifications.list()[:limit]
        ]
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notifications(
    notifications: NotificationCenter = Depends(get_notification_center)
):
    """Dismiss every notification"""
    notifications.clear()
