"""RSS feed endpoints.

``/rss`` and ``/rss.xml`` serve the same document; they differ only in
whether the browser is asked to display it or download it.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from newshub.application.schemas import FeedPreviewResponse
from newshub.application.services import FeedService
from newshub.infrastructure.dependencies import get_feed_service

router = APIRouter(tags=["Feed"])

RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"
FEED_FILENAME = "rss.xml"


def _rss_response(rss: str, disposition: str) -> Response:
    return Response(
        content=rss,
        media_type=RSS_MEDIA_TYPE,
        headers={"Content-Disposition": f'{disposition}; filename="{FEED_FILENAME}"'},
    )


@router.get("/rss", response_class=Response)
async def view_feed(service: FeedService = Depends(get_feed_service)) -> Response:
    """RSS feed for display in the browser."""
    return _rss_response(await service.render(), "inline")


@router.get("/rss.xml", response_class=Response)
async def download_feed(service: FeedService = Depends(get_feed_service)) -> Response:
    """RSS feed as a downloadable file. This is the canonical feed URL."""
    return _rss_response(await service.render(), "attachment")


@router.get("/rss/preview", response_model=FeedPreviewResponse)
async def preview_feed(service: FeedService = Depends(get_feed_service)) -> FeedPreviewResponse:
    """RSS document wrapped in JSON with the published article count."""
    preview = await service.preview()
    return FeedPreviewResponse(rss=preview.rss, article_count=preview.article_count)
