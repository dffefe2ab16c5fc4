"""FastAPI application entry point."""

import logging
import sys

from fastapi import FastAPI

from .config.settings import get_settings
from .api.routes import health_router, image_router
from .api.dependencies import shutdown_services

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Image Service",
    description="Text-to-image generation service backed by the OpenAI images API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Include routers
app.include_router(health_router)
app.include_router(image_router)


@app.on_event("startup")
async def startup_event() -> None:
    """Application startup event."""
    settings = get_settings()
    logger.info("=" * 50)
    logger.info("Image Service Starting")
    logger.info(f"Images Endpoint: {settings.openai_images_endpoint}")
    logger.info(f"Organization: {settings.openai_organization or '(none)'}")
    logger.info(f"Max Retries: {settings.image_generation_max_retries}")
    logger.info(f"API Key Configured: {settings.openai_api_key is not None}")
    logger.info("=" * 50)


@app.on_event("shutdown")
async def shutdown_event() -> None:
    """Application shutdown event."""
    logger.info("Image Service Shutting Down")
    await shutdown_services()


if __name__ == "__main__":
    import uvicorn
    
    settings = get_settings()
    uvicorn.run(
        "image_service.main:app",
        host=settings.image_service_host,
        port=settings.image_service_port,
        reload=True,
    )
