"""httpx implementation of RequestExecutor."""

import logging

import httpx
from pydantic import ValidationError
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log,
    retry_if_exception,
)

from ...domain.entities.image_generation import GenerationResponse, ServiceConfig
from ...domain.interfaces.image_generator import ProviderRequestError
from ...domain.interfaces.request_executor import RequestDecorator, ResultSelector
from .response_extractor import extract_all

logger = logging.getLogger(__name__)

USER_AGENT = "image-service/0.1.0"
ORGANIZATION_HEADER = "OpenAI-Organization"


def _is_retryable_error(exception: BaseException) -> bool:
    """
    Check if the exception is worth another attempt.

    Returns True for rate limits (429), server errors (5xx) and network
    failures. Client errors such as 400/401 are raised immediately.
    """
    if isinstance(exception, httpx.HTTPStatusError):
        status_code = exception.response.status_code
        return status_code == 429 or status_code >= 500
    return isinstance(exception, httpx.TransportError)


def decorate_request(request: httpx.Request, config: ServiceConfig) -> None:
    """Attach authentication headers from ``config`` to an outgoing request."""
    request.headers["Authorization"] = f"Bearer {config.api_key}"
    if config.organization_id:
        request.headers[ORGANIZATION_HEADER] = config.organization_id


class HttpxRequestExecutor:
    """
    Request executor backed by ``httpx.AsyncClient``.

    Each attempt builds its own request and passes it through the registered
    decorator right before send, retries included. The client itself is never
    modified.
    Implements exponential backoff retry for rate limit, server and network
    errors.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 120.0,
        max_retries: int = 3,
        backoff_multiplier: float = 1.0,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=timeout, headers={"User-Agent": USER_AGENT})

        self._client = client
        self._max_retries = max_retries
        self._backoff_multiplier = backoff_multiplier
        self._request_decorator: RequestDecorator | None = None

    def set_request_decorator(self, decorator: RequestDecorator) -> None:
        """Register the single hook applied to each outgoing request."""
        self._request_decorator = decorator

    async def execute(
        self,
        endpoint_url: str,
        request_body: str,
        result_selector: ResultSelector,
    ) -> list[str]:
        """
        POST ``request_body`` to ``endpoint_url`` and project the returned images.

        Retry timing: 1s -> 2s -> 4s -> 8s (max) with the default multiplier.

        Raises:
            ProviderRequestError: On network failure, non-success status or bad body
            ProtocolViolationError: If a result lacks the selected field
        """
        retry_decorator = retry(
            retry=retry_if_exception(_is_retryable_error),
            stop=stop_after_attempt(self._max_retries + 1),  # +1 because first attempt isn't a retry
            wait=wait_exponential(
                multiplier=self._backoff_multiplier,
                min=self._backoff_multiplier,
                max=8,
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

        @retry_decorator
        async def _send() -> httpx.Response:
            request = self._client.build_request(
                "POST",
                endpoint_url,
                content=request_body,
                headers={"Content-Type": "application/json"},
            )
            if self._request_decorator is not None:
                self._request_decorator(request)
            response = await self._client.send(request)
            response.raise_for_status()
            return response

        try:
            response = await _send()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise ProviderRequestError(
                f"Image request failed with status {status_code}: {e.response.text}",
                status_code=status_code,
                response_body=e.response.text,
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderRequestError(f"Image request failed: {e}", original_error=e) from e

        try:
            decoded = GenerationResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise ProviderRequestError(
                "Provider returned an undecodable image generation response",
                status_code=response.status_code,
                response_body=response.text,
                original_error=e,
            ) from e

        return extract_all(decoded.data, result_selector)

    async def aclose(self) -> None:
        """Close the underlying client if this executor created it."""
        if self._owns_client:
            await self._client.aclose()
