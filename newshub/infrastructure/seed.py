"""Sample articles for demos and local development."""

import logging
from datetime import datetime, timezone

from newshub.application.interfaces import ArticleRepository
from newshub.domain.entities import ArticleDraft, ArticleStatus

logger = logging.getLogger(__name__)

SAMPLE_ARTICLES: tuple[ArticleDraft, ...] = (
    ArticleDraft(
        title="The latest AI technology of 2024",
        content=(
            "Artificial intelligence is developing at breakneck speed. New AI tools such as "
            "ChatGPT, Gemini and Claude have changed the way we work and learn. This article "
            "explores the leading AI trends of 2024 and their impact on everyday life."
        ),
        excerpt="A look at the leading AI trends and their impact on everyday life in 2024",
        author="Nguyen Van A",
        category="Technology",
        status=ArticleStatus.PUBLISHED,
        tags=["AI", "Machine Learning", "Technology"],
        image_url="https://images.unsplash.com/photo-1677442136019-21780ecad995?w=800",
        publish_date=datetime(2024, 1, 15, tzinfo=timezone.utc),
    ),
    ArticleDraft(
        title="Digital business trends for 2024",
        content=(
            "Digital business is becoming the dominant trend. Companies need a digital "
            "transformation to compete effectively. From e-commerce to digital marketing, "
            "every aspect of a business has to be digitised to keep up."
        ),
        excerpt="Digital transformation and the business trends that matter in 2024",
        author="Tran Thi B",
        category="Business",
        status=ArticleStatus.PUBLISHED,
        tags=["Digital Business", "E-commerce", "Digital Marketing"],
        image_url="https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=800",
        publish_date=datetime(2024, 1, 10, tzinfo=timezone.utc),
    ),
    ArticleDraft(
        title="Vietnamese athletes at the 2024 SEA Games",
        content=(
            "The Vietnamese delegation achieved impressive results at the 2024 SEA Games. "
            "With strong competitive spirit and careful preparation, the athletes brought "
            "home many valuable medals."
        ),
        excerpt="Highlights from Vietnam's performance at the 2024 SEA Games",
        author="Le Van C",
        category="Sports",
        status=ArticleStatus.PUBLISHED,
        tags=["SEA Games", "Vietnam Sports", "Athletics"],
        image_url="https://images.unsplash.com/photo-1551698618-1dfe5d97d256?w=800",
        publish_date=datetime(2024, 1, 8, tzinfo=timezone.utc),
    ),
)


async def seed_sample_articles(repository: ArticleRepository) -> int:
    """Insert the sample articles into an empty store. Idempotent."""
    if await repository.get_all():
        logger.debug("Article store is not empty, skipping sample data")
        return 0
    for draft in SAMPLE_ARTICLES:
        await repository.create(draft)
    logger.info("Seeded %d sample articles", len(SAMPLE_ARTICLES))
    return len(SAMPLE_ARTICLES)
