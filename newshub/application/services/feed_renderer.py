"""RSS 2.0 document rendering.

``render_feed`` is a pure function: the same articles and channel always
produce the same bytes, apart from the channel's ``lastBuildDate`` and
``pubDate`` which carry the render time. Articles are rendered in the order
given; filtering to published articles and truncating to the item limit is
the caller's job.

The document is written by Django's ``Rss201rev2Feed`` generator, so every
character node and attribute value is entity-escaped. Titles and
descriptions may therefore contain markup, ampersands or ``]]>`` without
breaking the document.
"""

import html
from collections.abc import Sequence
from datetime import datetime, timezone

from django.utils.feedgenerator import Enclosure, Rss201rev2Feed, rfc2822_date

from newshub.domain.entities import Article, FeedChannel, strip_control_characters

RSS_NAMESPACES = {
    "xmlns:content": "http://purl.org/rss/1.0/modules/content/",
    "xmlns:media": "http://search.yahoo.com/mrss/",
}

ENCLOSURE_MIME_TYPE = "image/jpeg"

# Inline images cycle through these (width, height) pairs by item index.
IMAGE_SIZE_PRESETS: tuple[tuple[int, int], ...] = (
    (600, 400),
    (500, 300),
    (700, 350),
    (550, 450),
    (650, 300),
)

_INLINE_IMAGE_STYLE = "max-width: 100%; height: auto; margin-bottom: 10px; object-fit: cover;"


class NewsFeed(Rss201rev2Feed):
    """Rss201rev2Feed with the channel image block, editor contacts and item bylines."""

    def rss_attributes(self) -> dict[str, str]:
        return {**super().rss_attributes(), **RSS_NAMESPACES}

    def add_root_elements(self, handler) -> None:
        feed = self.feed
        build_date = rfc2822_date(feed["build_date"])

        handler.addQuickElement("title", feed["title"])
        handler.addQuickElement("description", feed["description"])
        handler.addQuickElement("link", feed["link"])
        handler.addQuickElement("language", feed["language"])
        handler.addQuickElement("copyright", feed["feed_copyright"])
        if feed["managing_editor"]:
            handler.addQuickElement("managingEditor", feed["managing_editor"])
        if feed["web_master"]:
            handler.addQuickElement("webMaster", feed["web_master"])
        handler.addQuickElement("lastBuildDate", build_date)
        handler.addQuickElement("pubDate", build_date)
        handler.addQuickElement("ttl", feed["ttl"])

        handler.startElement("image", {})
        handler.addQuickElement("url", feed["image_url"])
        handler.addQuickElement("title", feed["title"])
        handler.addQuickElement("link", feed["link"])
        handler.addQuickElement("width", str(feed["image_width"]))
        handler.addQuickElement("height", str(feed["image_height"]))
        handler.endElement("image")

        handler.addQuickElement(
            "atom:link",
            None,
            {"href": feed["feed_url"], "rel": "self", "type": "application/rss+xml"},
        )

    def add_item_elements(self, handler, item) -> None:
        super().add_item_elements(handler, item)
        handler.addQuickElement("author", item["byline"])

    def latest_post_date(self) -> datetime:
        return self.feed["build_date"]


def as_utc(value: datetime) -> datetime:
    """Timezone-aware UTC copy of ``value``; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_rfc2822(value: datetime) -> str:
    """RFC 2822 date in UTC (e.g. ``Mon, 01 Jan 2024 00:00:00 +0000``)."""
    return rfc2822_date(as_utc(value))


def article_link(base_url: str, article: Article) -> str:
    return f"{base_url.rstrip('/')}/articles/{article.id}"


def build_item_description(article: Article, index: int) -> str:
    """Item description: an inline image (when present) followed by the excerpt."""
    excerpt = strip_control_characters(article.excerpt)
    if not article.image_url:
        return excerpt
    width, height = IMAGE_SIZE_PRESETS[index % len(IMAGE_SIZE_PRESETS)]
    return (
        f'<img src="{html.escape(article.image_url, quote=True)}" '
        f'width="{width}" height="{height}" style="{_INLINE_IMAGE_STYLE}" />'
        f"<br/>{excerpt}"
    )


def _build_feed(channel: FeedChannel, now: datetime) -> NewsFeed:
    base_url = channel.base_url.rstrip("/")
    return NewsFeed(
        title=strip_control_characters(channel.title),
        link=base_url,
        description=strip_control_characters(channel.description),
        language=channel.language,
        feed_url=channel.self_link,
        feed_copyright=f"Copyright {strip_control_characters(channel.title)} {now.year}",
        ttl=channel.ttl,
        build_date=now,
        image_url=channel.image_url,
        image_width=channel.image_width,
        image_height=channel.image_height,
        managing_editor=channel.managing_editor,
        web_master=channel.web_master,
    )


def render_feed(
    articles: Sequence[Article],
    channel: FeedChannel,
    *,
    now: datetime | None = None,
) -> str:
    """Render ``articles`` as an RSS 2.0 document (UTF-8 text)."""
    now = as_utc(now or datetime.now(timezone.utc))
    feed = _build_feed(channel, now)

    for index, article in enumerate(articles):
        link = article_link(channel.base_url, article)
        feed.add_item(
            title=strip_control_characters(article.title),
            link=link,
            description=build_item_description(article, index),
            unique_id=link,
            pubdate=as_utc(article.publish_date),
            categories=[strip_control_characters(article.category)],
            enclosures=(
                [Enclosure(article.image_url, "0", ENCLOSURE_MIME_TYPE)] if article.image_url else None
            ),
            byline=strip_control_characters(article.author),
        )

    return feed.writeString("utf-8")
