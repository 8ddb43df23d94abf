"""Application service (use case) for Article operations."""

import logging

from newshub.application.interfaces import ArticleRepository
from newshub.application.schemas import ArticleCreate, ArticleUpdate
from newshub.domain.entities import Article
from newshub.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: str) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            logger.debug("Article %s not found", article_id)
            raise EntityNotFoundError("Article", article_id)
        return article

    async def view_article(self, article_id: str) -> Article:
        """Fetch an article for a reader and count the view."""
        if not await self._repository.increment_views(article_id):
            raise EntityNotFoundError("Article", article_id)
        return await self.get_article(article_id)

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def list_published(self) -> list[Article]:
        return await self._repository.list_published()

    async def create_article(self, data: ArticleCreate) -> Article:
        return await self._repository.create(data.to_draft())

    async def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        article = await self._repository.update(article_id, data.changes())
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def delete_article(self, article_id: str) -> None:
        if not await self._repository.delete(article_id):
            raise EntityNotFoundError("Article", article_id)

    async def cleanup_unpublished(self) -> int:
        return await self._repository.cleanup_unpublished()
