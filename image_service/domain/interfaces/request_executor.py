"""Abstract interface for the HTTP execution collaborator."""

from collections.abc import Callable
from typing import Any, Protocol

from ..entities.image_generation import ImageResult

ResultSelector = Callable[[ImageResult], str | None]
RequestDecorator = Callable[[Any], None]


class RequestExecutor(Protocol):
    """
    Transport that sends image generation requests to a provider.

    Implementations own connection handling, retries and response decoding.
    The generator only supplies the endpoint, a JSON body and a projection
    of each decoded image result.
    """

    def set_request_decorator(self, decorator: RequestDecorator) -> None:
        """Register the hook applied to each outgoing request right before send."""
        ...

    async def execute(
        self,
        endpoint_url: str,
        request_body: str,
        result_selector: ResultSelector,
    ) -> list[str]:
        """
        Send a request and project each returned image with ``result_selector``.

        Raises:
            ProviderRequestError: On network failure, non-success status or bad body
            ProtocolViolationError: If a result lacks the selected field
        """
        ...

    async def aclose(self) -> None:
        """Close connections owned by the executor."""
        ...
