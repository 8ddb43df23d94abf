"""Application service for the RSS feed."""

from newshub.application.interfaces import ArticleRepository
from newshub.application.services.feed_renderer import render_feed
from newshub.config import Settings
from newshub.domain.entities import FeedChannel, FeedPreview

DEFAULT_MAX_ITEMS = 50


def build_feed_channel(settings: Settings) -> FeedChannel:
    """Channel metadata for the site described by ``settings``."""
    base_url = settings.base_url.rstrip("/")
    return FeedChannel(
        title=settings.feed_title,
        description=settings.feed_description,
        base_url=base_url,
        self_link=settings.feed_self_link,
        image_url=f"{base_url}{settings.feed_image_path}",
        language=settings.feed_language,
        image_width=settings.feed_image_width,
        image_height=settings.feed_image_height,
        ttl=settings.feed_ttl,
        managing_editor=settings.feed_managing_editor,
        web_master=settings.feed_web_master,
    )


class FeedService:
    """Feeds the newest published articles through the RSS renderer."""

    def __init__(
        self,
        repository: ArticleRepository,
        channel: FeedChannel,
        max_items: int = DEFAULT_MAX_ITEMS,
    ):
        self._repository = repository
        self._channel = channel
        self._max_items = max_items

    async def render(self) -> str:
        articles = await self._repository.list_published()
        return render_feed(articles[: self._max_items], self._channel)

    async def preview(self) -> FeedPreview:
        """The rendered feed plus the total number of published articles."""
        articles = await self._repository.list_published()
        rss = render_feed(articles[: self._max_items], self._channel)
        return FeedPreview(rss=rss, article_count=len(articles))
