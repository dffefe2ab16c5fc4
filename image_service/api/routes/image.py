"""Image generation API endpoints."""

import logging
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from ..dependencies import get_image_generator
from ...domain.interfaces.image_generator import (
    ImageGenerator,
    ImageGenerationError,
    ImageParameterError,
    ProviderRequestError,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/images", tags=["images"])


# Request/Response Models
class ImageGenerateRequest(BaseModel):
    """Request model for image generation."""
    prompt: str = Field(..., description="Image generation prompt")
    width: int = Field(default=1024, description="Image width in pixels (256, 512 or 1024)")
    height: int = Field(default=1024, description="Image height in pixels, must equal width")
    quality: str = Field(default="standard", description="Image quality (standard or hd)")
    style: str = Field(default="vivid", description="Image style (vivid or natural)")


class ImageGenerateResponse(BaseModel):
    """Response model for image generation."""
    url: str = Field(..., description="URL of the generated image")
    prompt: str = Field(..., description="Original prompt")
    size: str = Field(..., description="Image size as WIDTHxHEIGHT")


@router.post("/generate", response_model=ImageGenerateResponse)
async def generate_image(
    request: ImageGenerateRequest,
    generator: ImageGenerator = Depends(get_image_generator),
) -> ImageGenerateResponse:
    """
    Generate an image from a text prompt.

    Parameters are validated by the generator before the provider is called;
    rejected parameters produce a 400 naming the offending field.

    Args:
        request: Image generation request

    Returns:
        URL of the generated image with request metadata
    """
    try:
        logger.info(f"Generating image for prompt: {request.prompt[:50]}...")
        url = await generator.generate_image(
            request.prompt,
            request.width,
            request.height,
            quality=request.quality,
            style=request.style,
        )
    except ImageParameterError as e:
        logger.warning(f"Rejected image request: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"parameter": e.param_name, "message": str(e)},
        )
    except ProviderRequestError as e:
        logger.error(f"Image provider request failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
    except ImageGenerationError as e:
        logger.error(f"Image generation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    logger.info("Image generated successfully")
    return ImageGenerateResponse(
        url=url,
        prompt=request.prompt,
        size=f"{request.width}x{request.height}",
    )
