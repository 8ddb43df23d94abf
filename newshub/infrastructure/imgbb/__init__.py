"""ImgBB infrastructure package."""

from .imgbb_image_host import ImgBBImageHost

__all__ = ["ImgBBImageHost"]
