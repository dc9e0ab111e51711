"""
In-memory repository adapter - Implements UserRepository protocol.

Keeps users in a dict guarded by a lock. Enforces the same uniqueness
rules as the PostgreSQL schema, and ``create`` discards the row when the
caller's block raises, mirroring a rolled-back transaction. Used for local
development (REPOSITORY_BACKEND=memory) and tests.
"""

import itertools
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace

from src.domain.exceptions import EmailAlreadyInUse
from src.domain.models import NewUser, User


class InMemoryUserRepository:
    """Implements UserRepository protocol with process-local state."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            return next((u for u in self._users.values() if u.email == email), None)

    def all(self) -> list[User]:
        """Snapshot of every stored user, for inspection in tests."""
        with self._lock:
            return list(self._users.values())

    @contextmanager
    def create(self, user: NewUser) -> Iterator[int]:
        with self._lock:
            if any(u.email == user.email for u in self._users.values()):
                raise EmailAlreadyInUse(user.email)
            user_id = next(self._ids)
            self._users[user_id] = User(
                id=user_id,
                username=user.username,
                email=user.email,
                password_hash=user.password_hash,
                activation_token=user.activation_token,
                inactive=True,
            )

        try:
            yield user_id
        except BaseException:
            with self._lock:
                self._users.pop(user_id, None)
            raise

    def activate(self, token: str) -> int | None:
        with self._lock:
            for user_id, user in self._users.items():
                if user.activation_token == token:
                    self._users[user_id] = replace(user, inactive=False, activation_token=None)
                    return user_id
        return None

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def delete_all(self) -> None:
        with self._lock:
            self._users.clear()
