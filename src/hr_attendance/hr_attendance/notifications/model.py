from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Notification:
    notification_id: int
    user_id: int
    message: str
    type: str
    created_at: datetime
    is_read: bool = False

    def to_payload(self) -> dict:
        return {
            "id": self.notification_id,
            "userId": self.user_id,
            "message": self.message,
            "type": self.type,
            "isRead": self.is_read,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class Delivery:
    notification: Notification
    delivered: bool
