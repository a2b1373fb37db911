from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Sequence

from ..common.datetime_utils import from_db_datetime, to_db_datetime
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Notification
from .repository import NotificationRepository


def _to_notification(r: Dict[str, Any]) -> Notification:
    return Notification(
        notification_id=int(r["notification_id"]),
        user_id=int(r["user_id"]),
        message=r["message"],
        type=r["type"],
        created_at=from_db_datetime(r["created_at"]),
        is_read=bool(r.get("is_read", False)),
    )


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, user_id: int, message: str, type: str, created_at: datetime) -> Notification:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications(user_id, message, type, is_read, created_at)
                VALUES(%s,%s,%s,0,%s)
                """,
                (user_id, message, type, to_db_datetime(created_at)),
            )
            return Notification(
                notification_id=int(cur.lastrowid),
                user_id=user_id,
                message=message,
                type=type,
                created_at=created_at,
            )

    def list_for_user(self, user_id: int) -> Sequence[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT notification_id, user_id, message, type, is_read, created_at
                FROM notifications
                WHERE user_id=%s
                ORDER BY created_at DESC, notification_id DESC
                """,
                (user_id,),
            )
            return [_to_notification(r) for r in fetchall(cur)]

    def mark_read(self, *, notification_id: int, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE notifications SET is_read=1 WHERE notification_id=%s AND user_id=%s",
                (int(notification_id), int(user_id)),
            )
            return cur.rowcount > 0
