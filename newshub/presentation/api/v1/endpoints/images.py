"""Image upload endpoint — hosts article illustrations with a third-party service."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from newshub.application.schemas import ImageUploadResponse
from newshub.application.services import ImageService
from newshub.domain.exceptions import ImageHostingError, InvalidImageError
from newshub.infrastructure.dependencies import get_image_service

router = APIRouter(prefix="/images", tags=["Images"])


@router.post("", response_model=ImageUploadResponse)
async def upload_image(
    image: UploadFile = File(...),
    service: ImageService = Depends(get_image_service),
) -> ImageUploadResponse:
    """Upload an image and return its public URL."""
    try:
        service.check_declared(image.content_type, image.size)
        # One byte past the limit is enough to reject an undeclared oversize body
        data = await image.read(service.max_size_bytes + 1)
        url = await service.upload(data, image.filename or "image", image.content_type)
    except InvalidImageError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except ImageHostingError as e:
        code = (
            status.HTTP_503_SERVICE_UNAVAILABLE
            if e.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
            else status.HTTP_502_BAD_GATEWAY
        )
        raise HTTPException(status_code=code, detail=f"Failed to upload image: {e.message}")

    return ImageUploadResponse(
        success=True,
        image_url=url,
        message="Image uploaded successfully",
    )
