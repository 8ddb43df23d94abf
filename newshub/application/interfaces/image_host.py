"""Abstract interface for third-party image hosting."""

from abc import ABC, abstractmethod


class ImageHost(ABC):
    """Port for image hosting services.

    Implementations upload raw image bytes and return a publicly reachable
    URL. Failures are raised as ``ImageHostingError``.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short identifier used in error messages (e.g. 'imgbb')."""
        ...

    @abstractmethod
    async def upload(self, data: bytes, filename: str) -> str:
        """Upload an image and return its public URL."""
        ...
