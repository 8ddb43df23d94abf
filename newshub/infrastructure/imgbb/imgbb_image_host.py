"""ImgBB API client — implements the ImageHost interface.

Uploads images to ImgBB (https://api.imgbb.com/1/upload) as a multipart
form with httpx and returns the hosted URL.
"""

import logging

import httpx

from newshub.application.interfaces import ImageHost
from newshub.domain.exceptions import ImageHostingError

logger = logging.getLogger(__name__)


class ImgBBImageHost(ImageHost):
    """Infrastructure adapter — connects to the ImgBB upload API."""

    def __init__(
        self,
        api_key: str,
        upload_url: str = "https://api.imgbb.com/1/upload",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._upload_url = upload_url
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "imgbb"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def upload(self, data: bytes, filename: str) -> str:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.post(
                    self._upload_url,
                    data={"key": self._api_key},
                    files={"image": (filename, data)},
                )
            except httpx.HTTPError as exc:
                raise ImageHostingError(self.provider_name, 503, f"Image host unreachable: {exc}") from exc

            payload = self._parse_json(response)
            if response.status_code >= 400 or not payload.get("success"):
                self._raise_hosting_error(response, payload)

            url = (payload.get("data") or {}).get("url")
            if not url:
                raise ImageHostingError(self.provider_name, response.status_code, "Response did not include an image URL")
            return url

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_json(response: httpx.Response) -> dict:
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    def _raise_hosting_error(self, response: httpx.Response, payload: dict) -> None:
        """Raise an ImageHostingError carrying the upstream message."""
        error = payload.get("error")
        if isinstance(error, dict):
            message = error.get("message") or "Failed to upload image"
        elif isinstance(error, str):
            message = error
        else:
            message = "Failed to upload image"
        status_code = response.status_code if response.status_code >= 400 else 502
        raise ImageHostingError(self.provider_name, status_code, message)
