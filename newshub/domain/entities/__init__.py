from .article import Article, ArticleDraft, ArticleStatus, EDITABLE_ARTICLE_FIELDS, strip_control_characters
from .feed import ArticleStats, FeedChannel, FeedPreview
from .user import User

__all__ = [
    "Article",
    "ArticleDraft",
    "ArticleStatus",
    "EDITABLE_ARTICLE_FIELDS",
    "ArticleStats",
    "FeedChannel",
    "FeedPreview",
    "User",
    "strip_control_characters",
]
