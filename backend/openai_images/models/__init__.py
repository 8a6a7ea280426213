from .image import (
    ImageGenerationRequest,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
    InvalidImageValue,
)

__all__ = [
    "ImageGenerationRequest",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    "InvalidImageValue",
]
