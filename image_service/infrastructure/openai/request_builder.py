"""Validation and construction of OpenAI image generation requests."""

from enum import Enum
from typing import Any

from ...domain.entities.image_generation import (
    GenerationRequest,
    ImageQuality,
    ImageStyle,
    ResponseFormat,
)
from ...domain.interfaces.image_generator import ImageParameterError

SUPPORTED_SIZES = (256, 512, 1024)


def _lookup(choices: type[Enum], value: Any):
    # Exact, case-sensitive match; None and non-strings never match
    if not isinstance(value, str):
        return None
    for member in choices:
        if member.value == value:
            return member
    return None


def build_request(
    description: str,
    width: int,
    height: int,
    quality: str | None,
    style: str | None,
    response_format: ResponseFormat = ResponseFormat.URL,
) -> GenerationRequest:
    """
    Validate caller parameters and build a provider request.

    No defaults are applied here: a missing quality or style is an error,
    not "standard" / "vivid". The description is only required to be
    non-None.

    Args:
        description: Image description (prompt)
        width: Image width in pixels
        height: Image height in pixels
        quality: "standard" or "hd"
        style: "vivid" or "natural"
        response_format: How the provider should return the image

    Returns:
        Immutable GenerationRequest with count fixed at 1

    Raises:
        ImageParameterError: Naming the first rejected parameter
    """
    if description is None:
        raise ImageParameterError("description", description, "Description must not be None.")

    if width != height or width not in SUPPORTED_SIZES:
        raise ImageParameterError(
            "width",
            width,
            "OpenAI can generate only square images of size 256x256, 512x512, or 1024x1024.",
        )

    image_quality = _lookup(ImageQuality, quality)
    if image_quality is None:
        raise ImageParameterError("quality", quality, "Quality must be either 'standard' or 'hd'.")

    image_style = _lookup(ImageStyle, style)
    if image_style is None:
        raise ImageParameterError("style", style, "Style must be either 'vivid' or 'natural'.")

    return GenerationRequest(
        description=description,
        width=width,
        height=height,
        quality=image_quality,
        style=image_style,
        count=1,
        response_format=response_format,
    )
