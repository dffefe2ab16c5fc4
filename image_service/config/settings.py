"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings

OPENAI_IMAGES_ENDPOINT = "https://api.openai.com/v1/images/generations"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OpenAI Configuration
    openai_api_key: SecretStr | None = None
    openai_organization: str | None = None  # Only needed for multi-org accounts
    openai_images_endpoint: str = OPENAI_IMAGES_ENDPOINT

    # Request Configuration
    image_request_timeout: float = 120.0  # Seconds per HTTP attempt
    image_generation_max_retries: int = 3  # Retries for 429/5xx/network errors

    # Service Configuration
    image_service_host: str = "0.0.0.0"
    image_service_port: int = 8000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
