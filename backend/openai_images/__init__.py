"""
OpenAI image generation request payload.
"""
from .models.image import (
    ImageGenerationRequest,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
    InvalidImageValue,
)
from .core.log_config import setup_logging

__version__ = "1.0.0"

__all__ = [
    "ImageGenerationRequest",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    "InvalidImageValue",
    "setup_logging",
]
