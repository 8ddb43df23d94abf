"""Value objects describing the RSS feed and article statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeedChannel:
    """Channel-level metadata for the rendered RSS document.

    ``base_url`` is the public site root; item links are built as
    ``{base_url}/articles/{id}``. ``self_link`` is the URL the feed itself
    is retrieved from and ends up in the ``atom:link rel="self"`` element.
    """

    title: str
    description: str
    base_url: str
    self_link: str
    image_url: str
    language: str = "en"
    image_width: int = 144
    image_height: int = 144
    ttl: int = 60
    managing_editor: str | None = None
    web_master: str | None = None


@dataclass(frozen=True)
class FeedPreview:
    """Rendered feed plus the number of published articles behind it."""

    rss: str
    article_count: int


@dataclass(frozen=True)
class ArticleStats:
    total_articles: int
    published_articles: int
    total_views: int
