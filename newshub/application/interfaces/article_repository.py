"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from newshub.domain.entities import Article, ArticleDraft


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    The repository is the only writer of article state. Unknown ids are
    reported through ``None``/``False`` results, never by raising.
    """

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Return every article, newest ``created_at`` first."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def create(self, draft: ArticleDraft) -> Article:
        """Persist a new article and return it with its generated ID and timestamps."""
        ...

    @abstractmethod
    async def update(self, article_id: str, changes: dict[str, Any]) -> Article | None:
        """Merge ``changes`` into an existing article and refresh ``updated_at``."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def list_published(self) -> list[Article]:
        """Return published articles, newest ``publish_date`` first."""
        ...

    @abstractmethod
    async def increment_views(self, article_id: str) -> bool:
        """Count one view. Leaves ``updated_at`` alone; False if the id is unknown."""
        ...

    @abstractmethod
    async def cleanup_unpublished(self) -> int:
        """Remove every non-published article at once and return how many were removed."""
        ...
