"""Dashboard statistics endpoint."""

from fastapi import APIRouter, Depends

from newshub.application.schemas import StatsResponse
from newshub.application.services import StatsService
from newshub.config import Settings
from newshub.infrastructure.dependencies import get_app_settings, get_stats_service

router = APIRouter(tags=["Stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    service: StatsService = Depends(get_stats_service),
    settings: Settings = Depends(get_app_settings),
) -> StatsResponse:
    stats = await service.get_stats()
    return StatsResponse(
        total_articles=stats.total_articles,
        published_articles=stats.published_articles,
        total_views=stats.total_views,
        subscribers=settings.stats_subscribers,
    )
