"""Image generation entities - request, response and service configuration."""

import json
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ImageQuality(str, Enum):
    """Image quality accepted by the provider."""

    STANDARD = "standard"
    HD = "hd"


class ImageStyle(str, Enum):
    """Image style accepted by the provider."""

    VIVID = "vivid"
    NATURAL = "natural"


class ImageResult(BaseModel):
    """
    One generated image as returned by the provider.

    Exactly one of ``url`` / ``b64_json`` is populated, depending on the
    ``response_format`` of the request.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str | None = None
    b64_json: str | None = None
    revised_prompt: str | None = None


class GenerationResponse(BaseModel):
    """Decoded provider response: an ordered sequence of image results."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    created: int | None = None
    data: list[ImageResult] = Field(...)


class ResponseFormat(str, Enum):
    """
    How the provider should return images.

    Each member knows how to project an ImageResult onto the string the
    caller contracted for, so a single extraction routine serves both.
    """

    URL = "url"
    BASE64 = "b64_json"

    def select(self, image: ImageResult) -> str | None:
        """Project an image result onto the field for this format."""
        return image.url if self is ResponseFormat.URL else image.b64_json


@dataclass(frozen=True)
class GenerationRequest:
    """
    A validated, provider-ready image generation request.

    Built by ``build_request``; never constructed with unchecked input.
    """

    description: str
    width: int
    height: int
    quality: ImageQuality
    style: ImageStyle
    # Fixed for this contract
    count: int = 1
    response_format: ResponseFormat = ResponseFormat.URL

    @property
    def size(self) -> str:
        """Size in the provider's "WIDTHxHEIGHT" notation."""
        return f"{self.width}x{self.height}"

    def to_payload(self) -> dict:
        """Wire shape; key order is kept stable for the provider."""
        return {
            "prompt": self.description,
            "size": self.size,
            "n": self.count,
            "response_format": self.response_format.value,
            "style": self.style.value,
            "quality": self.quality.value,
        }

    def to_json(self) -> str:
        """Serialize the wire shape to a JSON request body."""
        return json.dumps(self.to_payload())


@dataclass(frozen=True)
class ServiceConfig:
    """Credentials attached to every outgoing provider request."""

    api_key: str
    organization_id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ValueError("api_key must be a non-empty string")

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        return f"ServiceConfig(api_key='***', organization_id={self.organization_id!r})"
