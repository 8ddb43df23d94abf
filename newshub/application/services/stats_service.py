"""Read-only article statistics, recomputed on every call."""

from newshub.application.interfaces import ArticleRepository
from newshub.domain.entities import ArticleStats


class StatsService:

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_stats(self) -> ArticleStats:
        articles = await self._repository.get_all()
        return ArticleStats(
            total_articles=len(articles),
            published_articles=sum(1 for a in articles if a.is_published),
            total_views=sum(a.views or 0 for a in articles),
        )
