"""
In‑memory storage for users.

``UserStore`` is the only owner of user state.  Records are kept in a
dictionary keyed by id, so point lookups, updates and deletes are O(1)
and listing follows insertion order.  The collection lives as long as
the process; nothing is persisted.

Each operation runs under one lock.  The counter increment and the
insert happen in the same critical section, so concurrent requests can
never receive duplicate or skipped ids.  Callers always get copies of
the stored records and cannot mutate store state behind its back.
"""

import logging
import threading
from typing import Dict, List, Optional

from ..schemas.user import UserPayload, UserRead

logger = logging.getLogger(__name__)


class UserStore:
    """Thread‑safe in‑memory collection of users."""

    def __init__(self) -> None:
        self._users: Dict[int, UserRead] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def insert(self, payload: UserPayload) -> int:
        """Store a new user and return the id assigned to it.

        Ids start at 1 and are never reused, even after deletion.
        """
        with self._lock:
            user_id = self._next_id
            self._next_id += 1
            self._users[user_id] = UserRead(id=user_id, email=payload.email, name=payload.name)
        logger.debug("Inserted user %s", user_id)
        return user_id

    def list_all(self) -> List[UserRead]:
        """Return every stored user in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def get(self, user_id: int) -> Optional[UserRead]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user is not None else None

    def update(self, user_id: int, name: str, email: str) -> Optional[UserRead]:
        """Replace Name and Email of an existing user.

        Returns the updated record, or ``None`` when no user has
        ``user_id``.  The id itself never changes.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user.name = name
            user.email = email
            return user.model_copy()

    def remove(self, user_id: int) -> bool:
        """Delete a user; return whether anything was removed."""
        with self._lock:
            removed = self._users.pop(user_id, None) is not None
        if removed:
            logger.debug("Removed user %s", user_id)
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def __len__(self) -> int:
        return self.count()
