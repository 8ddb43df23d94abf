"""In-memory storage engine."""

from .memory_article_repository import InMemoryArticleRepository
from .memory_user_repository import InMemoryUserRepository

__all__ = ["InMemoryArticleRepository", "InMemoryUserRepository"]
