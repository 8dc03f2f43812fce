"""
Notification Schemas
"""
import enum
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class NotificationLevel(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notification(BaseModel):
    """Transient user-facing message (a toast)"""
    level: NotificationLevel
    message: str
    created_at: datetime = Field(default_factory=datetime.utcnow)


class NotificationList(BaseModel):
    notifications: List[Notification]
