"""In-memory user repository."""

import threading
import uuid
from dataclasses import replace

from newshub.application.interfaces import UserRepository
from newshub.domain.entities import User
from newshub.domain.exceptions import DuplicateEntityError


class InMemoryUserRepository(UserRepository):

    def __init__(self):
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    async def get_user(self, user_id: str) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    async def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return replace(user)
        return None

    async def create_user(self, username: str, password: str) -> User:
        with self._lock:
            if any(u.username == username for u in self._users.values()):
                raise DuplicateEntityError("User", "username", username)
            user = User(id=str(uuid.uuid4()), username=username, password=password)
            self._users[user.id] = user
            return replace(user)
