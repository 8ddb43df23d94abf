"""In-memory article repository — the default storage engine.

Articles live in a dict keyed by id. Every operation runs inside one
``threading.Lock`` and the critical sections never ``await``, so the store
stays consistent under the asyncio event loop and under worker threads alike.
Callers always receive copies; mutating a returned Article never touches
stored state.
"""

import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from newshub.application.interfaces import ArticleRepository
from newshub.domain.entities import Article, ArticleDraft, ArticleStatus, EDITABLE_ARTICLE_FIELDS

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _aware(value: datetime) -> datetime:
    # Naive timestamps are taken as UTC so published articles stay sortable
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _snapshot(article: Article) -> Article:
    return replace(article, tags=list(article.tags))


class InMemoryArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port with a process-local dict."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._articles: dict[str, Article] = {}
        self._lock = threading.Lock()
        self._clock = clock

    async def get_all(self) -> list[Article]:
        with self._lock:
            articles = [_snapshot(a) for a in self._articles.values()]
        return sorted(articles, key=lambda a: a.created_at, reverse=True)

    async def get_by_id(self, article_id: str) -> Article | None:
        with self._lock:
            article = self._articles.get(article_id)
            return _snapshot(article) if article else None

    async def create(self, draft: ArticleDraft) -> Article:
        now = self._clock()
        article = Article(
            id=str(uuid.uuid4()),
            title=draft.title,
            content=draft.content,
            excerpt=draft.excerpt,
            author=draft.author,
            category=draft.category,
            status=ArticleStatus(draft.status),
            tags=list(draft.tags),
            image_url=draft.image_url,
            views=0,
            publish_date=_aware(draft.publish_date or now),
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._articles[article.id] = article
        logger.info("Created article %s (%s)", article.id, article.status.value)
        return _snapshot(article)

    async def update(self, article_id: str, changes: dict[str, Any]) -> Article | None:
        illegal = set(changes) - EDITABLE_ARTICLE_FIELDS
        if illegal:
            raise ValueError(f"Cannot update article fields: {', '.join(sorted(illegal))}")

        with self._lock:
            article = self._articles.get(article_id)
            if article is None:
                logger.debug("Update skipped, article %s not found", article_id)
                return None
            values = dict(changes)
            if "status" in values:
                values["status"] = ArticleStatus(values["status"])
            if "tags" in values:
                values["tags"] = list(values["tags"])
            if "publish_date" in values:
                values["publish_date"] = _aware(values["publish_date"])
            updated = replace(article, **values, updated_at=self._clock())
            self._articles[article_id] = updated
            return _snapshot(updated)

    async def delete(self, article_id: str) -> bool:
        with self._lock:
            removed = self._articles.pop(article_id, None)
        if removed is None:
            return False
        logger.info("Deleted article %s", article_id)
        return True

    async def list_published(self) -> list[Article]:
        with self._lock:
            articles = [_snapshot(a) for a in self._articles.values() if a.is_published]
        return sorted(articles, key=lambda a: a.publish_date, reverse=True)

    async def increment_views(self, article_id: str) -> bool:
        with self._lock:
            article = self._articles.get(article_id)
            if article is None:
                return False
            article.views += 1
        return True

    async def cleanup_unpublished(self) -> int:
        with self._lock:
            doomed = [a.id for a in self._articles.values() if not a.is_published]
            for article_id in doomed:
                del self._articles[article_id]
        logger.info("Cleanup removed %d unpublished articles", len(doomed))
        return len(doomed)
