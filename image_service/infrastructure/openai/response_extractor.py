"""Reduce a provider response to the single value the caller asked for."""

from collections.abc import Callable, Sequence
from typing import Any

from ...domain.entities.image_generation import ImageResult
from ...domain.interfaces.image_generator import ProtocolViolationError


def extract_all(
    results: Sequence[ImageResult],
    selector: Callable[[ImageResult], str | None],
) -> list[str]:
    """Project every image result, failing on any result missing the selected field."""
    values = []
    for index, image in enumerate(results):
        value = selector(image)
        if value is None:
            raise ProtocolViolationError(f"Image result {index} is missing the requested field")
        values.append(value)
    return values


def extract_first(
    results: Sequence[Any],
    selector: Callable[[Any], str | None] | None = None,
) -> str:
    """
    Return ``selector`` applied to the first result.

    Without a selector the first result is returned as-is, for sequences
    the transport already projected to strings.

    Raises:
        ProtocolViolationError: If there are no results or the value is missing
    """
    if not results:
        raise ProtocolViolationError("Provider reported success but returned no images")

    first = results[0]
    value = selector(first) if selector is not None else first
    if value is None:
        raise ProtocolViolationError("First image result is missing the requested field")
    return value
