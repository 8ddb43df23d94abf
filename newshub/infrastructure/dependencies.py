"""FastAPI dependency injection — wires infrastructure to application layer.

Storage is owned by the application instance (``app.state``), not by module
globals: the memory engine keeps one repository for the app's lifetime,
the database engine hands out one session-bound repository per request.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from newshub.application.interfaces import ArticleRepository
from newshub.application.services import (
    ArticleService,
    FeedService,
    ImageService,
    StatsService,
    build_feed_channel,
)
from newshub.config import Settings
from newshub.infrastructure.database.repositories import SQLAlchemyArticleRepository


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


async def get_article_repository(request: Request) -> AsyncGenerator[ArticleRepository, None]:
    """Provides the article repository for the configured storage engine."""
    database = request.app.state.database
    if database is None:
        yield request.app.state.article_repository
        return

    async with database.session() as session:
        yield SQLAlchemyArticleRepository(session)


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)


async def get_feed_service(
    repository: ArticleRepository = Depends(get_article_repository),
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[FeedService, None]:
    """Provides a FeedService configured with the site's channel metadata."""
    yield FeedService(
        repository,
        build_feed_channel(settings),
        max_items=settings.feed_max_items,
    )


async def get_stats_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[StatsService, None]:
    yield StatsService(repository)


async def get_image_service(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[ImageService, None]:
    """Provides an ImageService backed by the app's image host (if configured)."""
    yield ImageService(
        request.app.state.image_host,
        max_size_bytes=settings.max_image_size_bytes,
    )
