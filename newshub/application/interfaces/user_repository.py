"""Abstract user repository interface."""

from abc import ABC, abstractmethod

from newshub.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence."""

    @abstractmethod
    async def get_user(self, user_id: str) -> User | None:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def create_user(self, username: str, password: str) -> User:
        """Create a user. Raises DuplicateEntityError if the username is taken."""
        ...
