"""Domain entities — pure Python business objects, no framework dependencies."""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


# C0 controls other than tab, newline and carriage return are illegal in XML 1.0
_CONTROL_CHARACTERS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def strip_control_characters(value: str) -> str:
    return _CONTROL_CHARACTERS.sub("", value)


class ArticleStatus(str, Enum):
    """Lifecycle states of an article. Only published articles reach the feed."""

    DRAFT = "draft"
    PUBLISHED = "published"
    SCHEDULED = "scheduled"


@dataclass
class ArticleDraft:
    """Validated input for a new article — everything the editor supplies."""

    title: str
    content: str
    excerpt: str
    author: str
    category: str
    status: ArticleStatus = ArticleStatus.DRAFT
    tags: list[str] = field(default_factory=list)
    image_url: str | None = None
    publish_date: datetime | None = None


@dataclass
class Article:
    """Core domain entity representing a stored news article."""

    id: str
    title: str
    content: str
    excerpt: str
    author: str
    category: str
    status: ArticleStatus = ArticleStatus.DRAFT
    tags: list[str] = field(default_factory=list)
    image_url: str | None = None
    views: int = 0
    publish_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_published(self) -> bool:
        return self.status == ArticleStatus.PUBLISHED


# Fields a partial update may touch. Identity, counters and timestamps are
# owned by the repository.
EDITABLE_ARTICLE_FIELDS = frozenset({
    "title",
    "content",
    "excerpt",
    "author",
    "category",
    "status",
    "tags",
    "image_url",
    "publish_date",
})
