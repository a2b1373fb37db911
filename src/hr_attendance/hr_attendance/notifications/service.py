from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_NOTIFICATION_TYPE
from ..core.exceptions import NotFoundError
from .connection import Connection
from .model import Delivery, Notification
from .registry import SessionRegistry
from .repository import NotificationRepository

logger = logging.getLogger(__name__)

NEW_NOTIFICATION_EVENT = "new_notification"


class NotificationRelay:
    """Best-effort push: every message is stored, live delivery only when online."""

    def __init__(self, notifications: NotificationRepository, registry: SessionRegistry):
        self._notifications = notifications
        self._registry = registry

    def register(self, user_id: int, connection: Connection) -> None:
        replaced = self._registry.add(int(user_id), connection)
        if replaced is not None and replaced is not connection:
            logger.info("User %s re-registered, replacing previous connection", user_id)
        else:
            logger.info("User registered: %s", user_id)

    def disconnect(self, connection: Connection) -> Optional[int]:
        user_id = self._registry.remove_connection(connection)
        if user_id is not None:
            logger.info("User disconnected: %s", user_id)
        return user_id

    def is_online(self, user_id: int) -> bool:
        return self._registry.lookup(int(user_id)) is not None

    def send(
        self,
        receiver_id: int,
        message: str,
        notification_type: str | None = None,
        *,
        now: datetime | None = None,
    ) -> Delivery:
        message = require_non_empty(message, "message")
        notification_type = optional_text(notification_type, "type", DEFAULT_NOTIFICATION_TYPE)
        notification = self._notifications.create(
            user_id=int(receiver_id),
            message=message,
            type=notification_type,
            created_at=now or now_utc(),
        )

        connection = self._registry.lookup(int(receiver_id))
        if connection is None:
            logger.info("Receiver %s offline, stored notification %s only", receiver_id, notification.notification_id)
            return Delivery(notification=notification, delivered=False)

        try:
            connection.emit(NEW_NOTIFICATION_EVENT, notification.to_payload())
        except Exception:
            logger.exception("Live delivery to %s failed; notification %s stays stored", receiver_id, notification.notification_id)
            return Delivery(notification=notification, delivered=False)

        logger.info("Notification %s sent to %s", notification.notification_id, receiver_id)
        return Delivery(notification=notification, delivered=True)

    def list_for_user(self, user_id: int) -> Sequence[Notification]:
        return self._notifications.list_for_user(int(user_id))

    def mark_read(self, notification_id: int, user_id: int) -> None:
        if not self._notifications.mark_read(notification_id=int(notification_id), user_id=int(user_id)):
            raise NotFoundError("Notification not found")
