"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from newshub.presentation.api.v1.endpoints.health import router as health_router
from newshub.presentation.api.v1.endpoints.articles import router as articles_router
from newshub.presentation.api.v1.endpoints.feed import router as feed_router
from newshub.presentation.api.v1.endpoints.stats import router as stats_router
from newshub.presentation.api.v1.endpoints.images import router as images_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(feed_router)
router.include_router(stats_router)
router.include_router(images_router)
