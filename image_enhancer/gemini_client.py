"""
Gemini enhancement client.

Sends the source image and the compiled prompt in one `generate_content` call with
image-only output, and returns the first inline image of the first candidate.
Failures are classified into RateLimited or EnhancementFailed; nothing is retried.
"""
import logging
import re
from typing import Any

from google import genai
from google.genai import types

from image_enhancer.config import AppConfig
from image_enhancer.errors import EnhancementFailed, NoImageInResponse, RateLimited
from image_enhancer.images import EnhancedImage

logger = logging.getLogger(__name__)

RATE_LIMIT_PATTERN = re.compile(r"\b(429|RESOURCE_EXHAUSTED)\b")


def create_genai_client(config: AppConfig) -> genai.Client:
    return genai.Client(api_key=config.api_key)


def is_rate_limited(exc: BaseException) -> bool:
    # google.genai.errors.APIError carries code/status
    if getattr(exc, "code", None) == 429 or getattr(exc, "status", None) == "RESOURCE_EXHAUSTED":
        return True
    return RATE_LIMIT_PATTERN.search(str(exc)) is not None


def build_contents(image_bytes: bytes, mime_type: str, prompt: str) -> list:
    return [
        types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
        types.Part.from_text(text=prompt),
    ]


def build_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(response_modalities=[types.Modality.IMAGE])


def extract_image(response: Any) -> EnhancedImage:
    """Return the first inline image part of the first candidate."""
    candidates = getattr(response, "candidates", None) or []
    content = getattr(candidates[0], "content", None) if candidates else None
    parts = getattr(content, "parts", None) or []

    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and inline.data:
            return EnhancedImage(data=inline.data, mime_type=inline.mime_type or "image/png")

    raise NoImageInResponse()


class EnhancementClient:
    """Thin wrapper around `genai.Client` for one-shot image enhancement."""

    def __init__(self, client: genai.Client, model: str):
        self._client = client
        self.model = model

    @classmethod
    def from_config(cls, config: AppConfig) -> "EnhancementClient":
        return cls(create_genai_client(config), config.model)

    def enhance(self, image_bytes: bytes, mime_type: str, prompt: str) -> EnhancedImage:
        logger.info("Requesting enhancement from %s (%s, %d bytes)", self.model, mime_type, len(image_bytes))
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=build_contents(image_bytes, mime_type, prompt),
                config=build_config(),
            )
        except Exception as exc:
            raise self._classify(exc) from exc
        return self._image_from(response)

    async def enhance_async(self, image_bytes: bytes, mime_type: str, prompt: str) -> EnhancedImage:
        logger.info("Requesting enhancement from %s (%s, %d bytes)", self.model, mime_type, len(image_bytes))
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=build_contents(image_bytes, mime_type, prompt),
                config=build_config(),
            )
        except Exception as exc:
            raise self._classify(exc) from exc
        return self._image_from(response)

    def _image_from(self, response: Any) -> EnhancedImage:
        try:
            image = extract_image(response)
        except NoImageInResponse:
            logger.error("No image found in the API response.")
            raise
        logger.info("Received enhanced image (%s, %d bytes)", image.mime_type, len(image.data))
        return image

    @staticmethod
    def _classify(exc: Exception) -> Exception:
        logger.exception("Error enhancing image with Gemini")
        if is_rate_limited(exc):
            return RateLimited()
        return EnhancementFailed()
