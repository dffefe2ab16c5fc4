"""OpenAI images API implementations."""

from .http_executor import HttpxRequestExecutor, decorate_request
from .openai_image_generator import OpenAIImageGenerator
from .request_builder import build_request
from .response_extractor import extract_all, extract_first

__all__ = [
    "HttpxRequestExecutor",
    "OpenAIImageGenerator",
    "build_request",
    "decorate_request",
    "extract_all",
    "extract_first",
]
