from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    CleanupResponse,
    MessageResponse,
)
from .feed import FeedPreviewResponse, ImageUploadResponse, StatsResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "CleanupResponse",
    "MessageResponse",
    "FeedPreviewResponse",
    "ImageUploadResponse",
    "StatsResponse",
]
