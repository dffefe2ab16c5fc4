"""OpenAI images API implementation of ImageGenerator."""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ...config.settings import OPENAI_IMAGES_ENDPOINT
from ...domain.entities.image_generation import ResponseFormat, ServiceConfig
from ...domain.interfaces.image_generator import ImageGenerator
from ...domain.interfaces.request_executor import RequestExecutor
from .http_executor import HttpxRequestExecutor, decorate_request
from .request_builder import build_request
from .response_extractor import extract_first

logger = logging.getLogger(__name__)

ORGANIZATION_KEY = "organization"


class OpenAIImageGenerator(ImageGenerator):
    """
    Image generator using the OpenAI images REST endpoint.

    Parameters are validated locally before any request is sent. Transport,
    retries and decoding are delegated to a RequestExecutor; authentication
    headers are attached through the executor's request decorator.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        api_key: str,
        organization: str | None = None,
        executor: RequestExecutor | None = None,
        endpoint: str = OPENAI_IMAGES_ENDPOINT,
    ) -> None:
        """
        Initialize the generator.

        Args:
            api_key: OpenAI API key
            organization: OpenAI organization id, only needed when the
                account belongs to multiple organizations
            executor: Custom transport; an httpx executor is created if omitted
            endpoint: Images generation endpoint URL

        Raises:
            ValueError: If the API key is missing or blank
        """
        self._config = ServiceConfig(api_key=api_key, organization_id=organization)
        self._endpoint = endpoint
        self._executor: RequestExecutor = executor or HttpxRequestExecutor()
        self._executor.set_request_decorator(
            lambda request: decorate_request(request, self._config)
        )

        attributes: dict[str, Any] = {}
        if organization:
            attributes[ORGANIZATION_KEY] = organization
        self._attributes = MappingProxyType(attributes)

        logger.info(f"Initialized OpenAIImageGenerator with endpoint: {self._endpoint}")

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Service metadata; only non-empty values are present."""
        return self._attributes

    async def generate_image(
        self,
        description: str,
        width: int,
        height: int,
        quality: str | None = "standard",
        style: str | None = "vivid",
    ) -> str:
        """
        Generate an image and return its URL.

        Cancelling the awaiting task aborts the pending HTTP request and
        propagates ``asyncio.CancelledError``; nothing is returned.
        """
        return await self._generate(description, width, height, quality, style, ResponseFormat.URL)

    async def _generate(
        self,
        description: str,
        width: int,
        height: int,
        quality: str | None,
        style: str | None,
        response_format: ResponseFormat,
    ) -> str:
        request = build_request(description, width, height, quality, style, response_format)

        logger.info(
            f"Generating {request.size} image (quality={request.quality.value}, "
            f"style={request.style.value}) for prompt: {request.description[:50]}..."
        )
        values = await self._executor.execute(
            self._endpoint,
            request.to_json(),
            response_format.select,
        )
        return extract_first(values)

    async def aclose(self) -> None:
        """Dispose of the underlying executor."""
        await self._executor.aclose()

    async def __aenter__(self) -> "OpenAIImageGenerator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
