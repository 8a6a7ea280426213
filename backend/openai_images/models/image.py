"""
Image Generation Request Model

Request payload for the OpenAI images endpoint (POST /v1/images/generations).
Field names follow Python conventions; wire keys follow the OpenAI docs.
"""
import json
import logging
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

MAX_PROMPT_LENGTH = 1000


class InvalidImageValue(ValueError):
    """Raised when a restricted field gets a literal the API does not accept."""


class _WireEnum(str, Enum):
    """Enum whose members map one-to-one onto wire literals."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            allowed = ", ".join(member.value for member in cls)
            raise InvalidImageValue(
                f"{value!r} is not a valid {cls.__name__}. Must be one of: {allowed}"
            ) from None


class ImageSize(_WireEnum):
    """The size of the generated images."""
    SIZE_256 = "256x256"
    SIZE_512 = "512x512"
    SIZE_1024 = "1024x1024"
    # dall-e-3 only
    SIZE_1792_1024 = "1792x1024"
    SIZE_1024_1792 = "1024x1792"


class ImageResponseFormat(_WireEnum):
    """The format in which the generated images are returned."""
    URL = "url"
    B64_JSON = "b64_json"


class ImageStyle(_WireEnum):
    """Style hint, only honoured by dall-e-3."""
    VIVID = "vivid"
    NATURAL = "natural"


DEFAULT_SIZE = ImageSize.SIZE_1024
DEFAULT_RESPONSE_FORMAT = ImageResponseFormat.URL


class ImageGenerationRequest(BaseModel):
    """
    Request model for image generation (OpenAI compatible).

    ``size`` and ``response_format`` may stay unset; they serialize as
    1024x1024 and url respectively.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    prompt: Optional[str] = Field(None, description="A text description of the desired image(s). The maximum length is 1000 characters.")
    num_of_images: Optional[int] = Field(1, alias="n", description="How many different choices to request for each prompt.")
    user: Optional[str] = Field(None, description="A unique identifier representing your end-user.")
    size: Optional[ImageSize] = Field(None, description="The size of the generated images.")
    model: str = Field("dall-e-2", description="The model to use for image generation.")
    style: str = Field(ImageStyle.VIVID.value, description="vivid or natural (dall-e-3 only).")
    response_format: Optional[ImageResponseFormat] = Field(None, description="The format in which the generated images are returned.")

    @classmethod
    def create(
        cls,
        prompt: str,
        model: str,
        num_of_images: Optional[int] = 1,
        size: Optional[ImageSize] = None,
        response_format: Optional[ImageResponseFormat] = None,
        style: str = ImageStyle.VIVID.value,
        user: Optional[str] = None,
    ) -> "ImageGenerationRequest":
        """
        Build a request with every parameter resolved.

        Args:
            prompt: A text description of the desired image(s).
            model: The model to use, e.g. "dall-e-3".
            num_of_images: How many images to generate. None omits ``n``.
            size: An ImageSize or its literal. Defaults to 1024x1024.
            response_format: An ImageResponseFormat or its literal. Defaults to url.
            style: "vivid" or "natural".
            user: End-user identifier.
        """
        return cls(
            prompt=prompt,
            model=model,
            num_of_images=num_of_images,
            size=size if size is not None else DEFAULT_SIZE,
            response_format=response_format if response_format is not None else DEFAULT_RESPONSE_FORMAT,
            style=style,
            user=user,
        )

    @field_validator("size", mode="before")
    @classmethod
    def validate_size(cls, v):
        if v is None:
            return None
        return ImageSize.parse(v)

    @field_validator("response_format", mode="before")
    @classmethod
    def validate_response_format(cls, v):
        if v is None:
            return None
        return ImageResponseFormat.parse(v)

    @field_validator("style", mode="before")
    @classmethod
    def validate_style(cls, v):
        # Free text; unknown styles are passed through for the API to judge
        if isinstance(v, ImageStyle):
            return v.value
        try:
            ImageStyle.parse(v)
        except InvalidImageValue:
            logger.warning("Unrecognised style %r, sending it unchanged", v)
        return v

    @field_validator("prompt")
    @classmethod
    def validate_prompt(cls, v):
        # The API is the authority on length (dall-e-3 accepts longer prompts)
        if v is not None and len(v) > MAX_PROMPT_LENGTH:
            logger.warning(
                "Prompt is %d characters, longer than the %d documented for dall-e-2",
                len(v),
                MAX_PROMPT_LENGTH,
            )
        return v

    # --- Wire format ---

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready request body, with wire key names."""
        payload: Dict[str, Any] = {}
        if self.prompt is not None:
            payload["prompt"] = self.prompt
        if self.num_of_images is not None:
            payload["n"] = self.num_of_images
        if self.user is not None:
            payload["user"] = self.user

        size = self.size
        if size is None:
            logger.debug("No size set, sending %s", DEFAULT_SIZE.value)
            size = DEFAULT_SIZE
        payload["size"] = size.value

        payload["model"] = self.model
        payload["style"] = self.style

        response_format = self.response_format
        if response_format is None:
            logger.debug("No response_format set, sending %s", DEFAULT_RESPONSE_FORMAT.value)
            response_format = DEFAULT_RESPONSE_FORMAT
        payload["response_format"] = response_format.value
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ImageGenerationRequest":
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str) -> "ImageGenerationRequest":
        return cls.model_validate_json(text)

    def _effective_payload(self) -> Dict[str, Any]:
        payload = self.to_payload()
        # The API generates one image when n is omitted
        payload.setdefault("n", 1)
        return payload

    def __eq__(self, other: Any) -> bool:
        # Unset fields equal the values the API falls back to
        if isinstance(other, ImageGenerationRequest):
            return self._effective_payload() == other._effective_payload()
        return NotImplemented
