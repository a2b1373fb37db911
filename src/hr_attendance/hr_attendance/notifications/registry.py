from __future__ import annotations

import threading
from typing import Dict, Optional

from .connection import Connection


class SessionRegistry:
    """Thread-safe user_id -> live connection map.

    One connection per user; registering again replaces the previous handle.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._by_user: Dict[int, Connection] = {}

    def add(self, user_id: int, connection: Connection) -> Optional[Connection]:
        """Map ``user_id`` to ``connection`` and return the handle it replaced."""
        with self._lock:
            previous = self._by_user.get(user_id)
            self._by_user[user_id] = connection
            return previous

    def remove(self, user_id: int) -> bool:
        with self._lock:
            return self._by_user.pop(user_id, None) is not None

    def remove_connection(self, connection: Connection) -> Optional[int]:
        """Drop whichever user still points at ``connection``."""
        with self._lock:
            for user_id, conn in self._by_user.items():
                if conn is connection:
                    del self._by_user[user_id]
                    return user_id
            return None

    def lookup(self, user_id: int) -> Optional[Connection]:
        with self._lock:
            return self._by_user.get(user_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_user)
