"""Transient user-facing notifications"""

import itertools
from collections import deque
from typing import Deque, List

from resumeai.models.notification import Notification, NotificationLevel
from resumeai.core.logging import get_logger

logger = get_logger(__name__)


class NotificationCenter:
    """Bounded history of notifications shown to the user"""

    def __init__(self, limit: int = 50):
        self._notifications: Deque[Notification] = deque(maxlen=limit)
        self._ids = itertools.count(1)

    def notify(self, level: NotificationLevel, message: str) -> Notification:
        """Record a notification and log it"""
        notification = Notification(id=next(self._ids), level=level, message=message)
        self._notifications.append(notification)

        if level == NotificationLevel.ERROR:
            logger.warning(f"Notification: {message}")
        else:
            logger.info(f"Notification: {message}")

        return notification

    def success(self, message: str) -> Notification:
        return self.notify(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self.notify(NotificationLevel.ERROR, message)

    def info(self, message: str) -> Notification:
        return self.notify(NotificationLevel.INFO, message)

    def list(self) -> List[Notification]:
        """Notifications, newest first"""
        return list(reversed(self._notifications))

    def clear(self) -> None:
        dismissed = len(self._notifications)
        self._notifications.clear()
        logger.info(f"Dismissed {dismissed} notifications")
