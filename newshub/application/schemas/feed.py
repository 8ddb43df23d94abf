"""Pydantic DTOs for the feed, statistics and image upload endpoints."""

from pydantic import BaseModel


class FeedPreviewResponse(BaseModel):
    """RSS document as JSON, with the number of published articles."""

    rss: str
    article_count: int


class StatsResponse(BaseModel):
    total_articles: int
    published_articles: int
    total_views: int
    subscribers: int


class ImageUploadResponse(BaseModel):
    success: bool
    image_url: str
    message: str
