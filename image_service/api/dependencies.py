"""FastAPI dependency injection setup."""

import logging

from ..config.settings import get_settings
from ..domain.entities.image_generation import ServiceConfig
from ..domain.interfaces.image_generator import ImageGenerator
from ..infrastructure.openai.http_executor import HttpxRequestExecutor
from ..infrastructure.openai.openai_image_generator import OpenAIImageGenerator

logger = logging.getLogger(__name__)

# Singleton instances
_image_generator: ImageGenerator | None = None


def get_image_generator() -> ImageGenerator:
    """
    Get the image generator singleton.
    
    Returns:
        ImageGenerator implementation

    Raises:
        ValueError: If no OpenAI API key is configured
    """
    global _image_generator
    if _image_generator is None:
        settings = get_settings()
        if settings.openai_api_key is None:
            raise ValueError("OPENAI_API_KEY is not configured")
        # Fails on a blank key before any client is opened
        config = ServiceConfig(
            api_key=settings.openai_api_key.get_secret_value(),
            organization_id=settings.openai_organization,
        )

        executor = HttpxRequestExecutor(
            timeout=settings.image_request_timeout,
            max_retries=settings.image_generation_max_retries,
        )
        _image_generator = OpenAIImageGenerator(
            api_key=config.api_key,
            organization=config.organization_id,
            executor=executor,
            endpoint=settings.openai_images_endpoint,
        )
        logger.info("OpenAIImageGenerator initialized")
    return _image_generator


async def shutdown_services() -> None:
    """Close the image generator, if one was created."""
    global _image_generator
    if _image_generator is not None:
        await _image_generator.aclose()
        _image_generator = None
        logger.info("Image generator closed")


def reset_dependencies() -> None:
    """Reset all dependencies (useful for testing)."""
    global _image_generator
    _image_generator = None
