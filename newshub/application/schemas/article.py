"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator

from newshub.domain.entities import ArticleDraft, ArticleStatus, strip_control_characters


def _assume_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _clean_text(value: Any) -> Any:
    if isinstance(value, str):
        return strip_control_characters(value)
    if isinstance(value, list):
        return [strip_control_characters(item) if isinstance(item, str) else item for item in value]
    return value


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["AI trends in 2024"])
    content: str = Field(..., min_length=1, examples=["Artificial intelligence keeps moving fast..."])
    excerpt: str = Field(..., min_length=1, examples=["A short look at this year's AI trends"])
    author: str = Field(..., min_length=1, examples=["Jane Doe"])
    category: str = Field(..., min_length=1, examples=["Technology"])
    status: ArticleStatus = ArticleStatus.DRAFT
    tags: list[str] = Field(default_factory=list)
    image_url: str | None = None
    publish_date: datetime | None = None

    @field_validator("title", "content", "excerpt", "author", "category", "tags", mode="before")
    @classmethod
    def clean_text(cls, value: Any) -> Any:
        return _clean_text(value)

    @field_validator("image_url", mode="before")
    @classmethod
    def normalize_image_url(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("publish_date")
    @classmethod
    def normalize_publish_date(cls, value: datetime | None) -> datetime | None:
        return _assume_utc(value)

    def to_draft(self) -> ArticleDraft:
        return ArticleDraft(
            title=self.title,
            content=self.content,
            excerpt=self.excerpt,
            author=self.author,
            category=self.category,
            status=self.status,
            tags=list(self.tags),
            image_url=self.image_url,
            publish_date=self.publish_date,
        )


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional.

    Only fields present in the request are applied. ``image_url`` may be
    sent as ``null`` to remove the illustration; every other field must
    carry a value when present.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    excerpt: str | None = Field(None, min_length=1)
    author: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1)
    status: ArticleStatus | None = None
    tags: list[str] | None = None
    image_url: str | None = None
    publish_date: datetime | None = None

    @field_validator(
        "title", "content", "excerpt", "author", "category", "status", "tags", "publish_date",
        mode="before",
    )
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        return _clean_text(value)

    @field_validator("image_url", mode="before")
    @classmethod
    def normalize_image_url(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("publish_date")
    @classmethod
    def normalize_publish_date(cls, value: datetime | None) -> datetime | None:
        return _assume_utc(value)

    def changes(self) -> dict[str, Any]:
        """The explicitly supplied fields, ready for a partial update."""
        return self.model_dump(exclude_unset=True)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    content: str
    excerpt: str
    author: str
    category: str
    status: ArticleStatus
    tags: list[str]
    image_url: str | None
    views: int
    publish_date: datetime
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    message: str


class CleanupResponse(BaseModel):
    """Result of removing every unpublished article."""

    message: str
    deleted_count: int
    description: str
