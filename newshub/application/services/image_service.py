"""Application service for article illustration uploads.

Checks the upload against the boundary rules (non-empty, ``image/*`` MIME
type, size limit) before handing it to the configured image host. Uploads
never touch article state; the returned URL is attached to an article by a
separate create or update.
"""

import logging

from newshub.application.interfaces import ImageHost
from newshub.domain.exceptions import ImageHostingError, InvalidImageError

logger = logging.getLogger(__name__)

DEFAULT_MAX_IMAGE_BYTES = 5 * 1024 * 1024


class ImageService:

    def __init__(self, host: ImageHost | None, max_size_bytes: int = DEFAULT_MAX_IMAGE_BYTES):
        self._host = host
        self._max_size_bytes = max_size_bytes

    @property
    def max_size_bytes(self) -> int:
        return self._max_size_bytes

    def check_declared(self, content_type: str | None, size: int | None) -> None:
        """Reject an upload from its declared MIME type and size, before the body is read."""
        self._check_content_type(content_type)
        if size is not None and size > self._max_size_bytes:
            raise self._too_large()

    def validate(self, data: bytes, content_type: str | None) -> None:
        if not data:
            raise InvalidImageError("No image file provided")
        self._check_content_type(content_type)
        if len(data) > self._max_size_bytes:
            raise self._too_large()

    def _check_content_type(self, content_type: str | None) -> None:
        if not content_type or not content_type.startswith("image/"):
            raise InvalidImageError("Only image files are allowed")

    def _too_large(self) -> InvalidImageError:
        limit_mb = self._max_size_bytes / (1024 * 1024)
        return InvalidImageError(f"Image exceeds the {limit_mb:g}MB limit", status_code=413)

    async def upload(self, data: bytes, filename: str, content_type: str | None) -> str:
        """Validate and upload an image, returning its public URL."""
        self.validate(data, content_type)
        if self._host is None:
            raise ImageHostingError("image_host", 503, "Image hosting is not configured")

        try:
            url = await self._host.upload(data, filename)
        except ImageHostingError as exc:
            logger.warning("Image upload to %s failed: %s", exc.provider, exc.message)
            raise
        logger.info("Uploaded image %s (%d bytes) to %s", filename, len(data), self._host.provider_name)
        return url
