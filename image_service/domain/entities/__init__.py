"""Domain entities."""

from .image_generation import (
    GenerationRequest,
    GenerationResponse,
    ImageQuality,
    ImageResult,
    ImageStyle,
    ResponseFormat,
    ServiceConfig,
)

__all__ = [
    "GenerationRequest",
    "GenerationResponse",
    "ImageQuality",
    "ImageResult",
    "ImageStyle",
    "ResponseFormat",
    "ServiceConfig",
]
