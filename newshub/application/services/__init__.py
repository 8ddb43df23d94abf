from .article_service import ArticleService
from .feed_renderer import render_feed
from .feed_service import FeedService, build_feed_channel
from .image_service import ImageService
from .stats_service import StatsService

__all__ = [
    "ArticleService",
    "FeedService",
    "ImageService",
    "StatsService",
    "build_feed_channel",
    "render_feed",
]
