"""Text-to-image generation service."""

__version__ = "0.1.0"
