"""Domain interfaces (ports) - abstract contracts for infrastructure."""

from .image_generator import (
    ImageGenerator,
    ImageGenerationError,
    ImageParameterError,
    ProviderRequestError,
    ProtocolViolationError,
)
from .request_executor import RequestExecutor, RequestDecorator, ResultSelector

__all__ = [
    "ImageGenerator",
    "ImageGenerationError",
    "ImageParameterError",
    "ProviderRequestError",
    "ProtocolViolationError",
    "RequestExecutor",
    "RequestDecorator",
    "ResultSelector",
]
