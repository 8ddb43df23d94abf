"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from newshub.application.schemas import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    CleanupResponse,
    MessageResponse,
)
from newshub.application.services import ArticleService
from newshub.domain.exceptions import EntityNotFoundError
from newshub.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article, newest first."""
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


# Fixed paths are registered before /{article_id} so they are not taken for ids.
@router.get("/published", response_model=list[ArticleResponse])
async def list_published_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve published articles, most recently published first."""
    articles = await service.list_published()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.post("/cleanup", response_model=CleanupResponse)
async def cleanup_unpublished_articles(
    service: ArticleService = Depends(get_article_service),
) -> CleanupResponse:
    """Permanently delete every article that is not published."""
    deleted_count = await service.cleanup_unpublished()
    return CleanupResponse(
        message="Cleanup completed",
        deleted_count=deleted_count,
        description=f"Removed {deleted_count} unpublished articles from the system",
    )


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID and count the view."""
    try:
        article = await service.view_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    article = await service.create_article(data)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article. Only the supplied fields change."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", response_model=MessageResponse)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MessageResponse(message="Article deleted successfully")
