"""SQLAlchemy ORM model for the User entity."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from newshub.infrastructure.database.base import Base


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username='{self.username}')>"
