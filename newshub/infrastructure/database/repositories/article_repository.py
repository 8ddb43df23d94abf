"""Concrete repository implementation backed by SQLAlchemy."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newshub.application.interfaces import ArticleRepository
from newshub.domain.entities import Article, ArticleDraft, ArticleStatus, EDITABLE_ARTICLE_FIELDS
from newshub.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            excerpt=model.excerpt,
            author=model.author,
            category=model.category,
            status=ArticleStatus(model.status),
            tags=list(model.tags or []),
            image_url=model.image_url,
            views=model.views or 0,
            publish_date=_aware(model.publish_date),
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    async def get_all(self) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .order_by(ArticleModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_id(self, article_id: str) -> Article | None:
        result = await self._session.get(ArticleModel, article_id, populate_existing=True)
        return self._to_entity(result) if result else None

    async def create(self, draft: ArticleDraft) -> Article:
        now = datetime.now(timezone.utc)
        model = ArticleModel(
            id=str(uuid.uuid4()),
            title=draft.title,
            content=draft.content,
            excerpt=draft.excerpt,
            author=draft.author,
            category=draft.category,
            status=ArticleStatus(draft.status).value,
            tags=list(draft.tags),
            image_url=draft.image_url,
            views=0,
            publish_date=draft.publish_date or now,
            created_at=now,
            updated_at=now,
        )
        self._session.add(model)
        await self._session.flush()
        logger.info("Created article %s (%s)", model.id, model.status)
        return self._to_entity(model)

    async def update(self, article_id: str, changes: dict[str, Any]) -> Article | None:
        illegal = set(changes) - EDITABLE_ARTICLE_FIELDS
        if illegal:
            raise ValueError(f"Cannot update article fields: {', '.join(sorted(illegal))}")

        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            logger.debug("Update skipped, article %s not found", article_id)
            return None
        for name, value in changes.items():
            if name == "status":
                value = ArticleStatus(value).value
            elif name == "tags":
                value = list(value)
            setattr(model, name, value)
        model.updated_at = datetime.now(timezone.utc)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: str) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted article %s", article_id)
        return True

    async def list_published(self) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.status == ArticleStatus.PUBLISHED.value)
            .order_by(ArticleModel.publish_date.desc())
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def increment_views(self, article_id: str) -> bool:
        # Single UPDATE so concurrent increments never lose a count
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(views=ArticleModel.views + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return bool(result.rowcount)

    async def cleanup_unpublished(self) -> int:
        stmt = (
            delete(ArticleModel)
            .where(ArticleModel.status != ArticleStatus.PUBLISHED.value)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        self._session.expunge_all()
        logger.info("Cleanup removed %d unpublished articles", result.rowcount)
        return result.rowcount
