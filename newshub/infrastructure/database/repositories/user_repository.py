"""SQLAlchemy-backed user repository."""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from newshub.application.interfaces import UserRepository
from newshub.domain.entities import User
from newshub.domain.exceptions import DuplicateEntityError
from newshub.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(id=model.id, username=model.username, password=model.password)

    async def get_user(self, user_id: str) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    async def get_user_by_username(self, username: str) -> User | None:
        result = await self._session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create_user(self, username: str, password: str) -> User:
        if await self.get_user_by_username(username) is not None:
            raise DuplicateEntityError("User", "username", username)
        model = UserModel(id=str(uuid.uuid4()), username=username, password=password)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
