"""Abstract interface for text-to-image generation."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class ImageGenerator(ABC):
    """
    Abstract interface for text-to-image generation.

    This interface defines the contract for image generation
    services, allowing different providers to be swapped
    without changing application code.
    """

    @property
    @abstractmethod
    def attributes(self) -> Mapping[str, Any]:
        """Read-only metadata describing the configured service."""

    @abstractmethod
    async def generate_image(
        self,
        description: str,
        width: int,
        height: int,
        quality: str | None = "standard",
        style: str | None = "vivid",
    ) -> str:
        """
        Generate an image matching the given description.

        Args:
            description: Image description
            width: Image width in pixels
            height: Image height in pixels
            quality: Image quality, "standard" or "hd"
            style: Image style, "vivid" or "natural"

        Returns:
            Generated image URL or base64 payload

        Raises:
            ImageParameterError: If a parameter is rejected before sending
            ProviderRequestError: If the provider call fails
            ProtocolViolationError: If the provider response breaks its contract
        """
        pass

    async def aclose(self) -> None:
        """Release underlying resources (e.g., HTTP connections)."""


class ImageGenerationError(Exception):
    """Exception raised when image generation fails."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class ImageParameterError(ImageGenerationError, ValueError):
    """A caller-supplied parameter was rejected before any request was sent."""

    def __init__(self, param_name: str, value: Any, message: str):
        super().__init__(f"{message} (Parameter '{param_name}', actual value: {value!r})")
        self.param_name = param_name
        self.value = value


class ProviderRequestError(ImageGenerationError):
    """The provider call failed: network error, non-success status or undecodable body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error)
        self.status_code = status_code
        self.response_body = response_body


class ProtocolViolationError(ImageGenerationError):
    """The provider reported success but the response breaks its contract."""
