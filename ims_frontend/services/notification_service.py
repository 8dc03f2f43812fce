"""
Notification Service

Collects transient user-facing messages (toasts) until the UI drains them.
"""
import logging
from collections import deque
from typing import List

from ims_frontend.schemas.notification import Notification, NotificationLevel

logger = logging.getLogger(__name__)


class NotificationService:

    def __init__(self, limit: int = 50):
        self._queue = deque(maxlen=limit)

    def notify(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self._queue.append(notification)
        if level == NotificationLevel.ERROR:
            logger.warning(f"[notify] {message}")
        else:
            logger.info(f"[notify] {message}")
        return notification

    def success(self, message: str) -> Notification:
        return self.notify(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self.notify(NotificationLevel.ERROR, message)

    def info(self, message: str) -> Notification:
        return self.notify(NotificationLevel.INFO, message)

    def pending(self) -> List[Notification]:
        """Queued notifications, oldest first, without removing them."""
        return list(self._queue)

    def messages(self) -> List[str]:
        return [n.message for n in self._queue]

    def drain(self) -> List[Notification]:
        items = list(self._queue)
        self._queue.clear()
        return items
