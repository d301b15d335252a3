"""Thin adapter over ``google.generativeai`` for the three call modes.

* text prompt -> free text
* text prompt -> JSON constrained by a response schema
* image + text prompt -> free text (which may itself contain JSON)

Transport, quota and safety-block errors are normalised into
:class:`RemoteCallError` so the gateway has one failure type to recover from.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Optional, Union

import google.generativeai as genai

from closet_app.logging_config import get_logger, log_event

LOGGER = get_logger(__name__)

_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,", re.IGNORECASE)
DEFAULT_IMAGE_MIME = "image/jpeg"


class GenAIError(RuntimeError):
    """Base class for remote model failures."""


class CredentialMissingError(GenAIError):
    """Raised when a call is attempted without an API key configured."""


class RemoteCallError(GenAIError):
    """Raised when the remote call fails or yields no usable text."""


class InvalidImageError(ValueError):
    """Raised when an image payload is not decodable base64 or is empty."""


@dataclass(frozen=True)
class ImagePayload:
    data: bytes
    mime_type: str = DEFAULT_IMAGE_MIME

    def as_part(self) -> dict:
        return {"mime_type": self.mime_type, "data": self.data}


def decode_image(image: Union[str, bytes, ImagePayload]) -> ImagePayload:
    """Accept raw bytes, bare base64 or a ``data:`` URL and return image bytes."""

    if isinstance(image, ImagePayload):
        payload = image
    elif isinstance(image, (bytes, bytearray)):
        payload = ImagePayload(data=bytes(image))
    else:
        text = image.strip()
        mime_type = DEFAULT_IMAGE_MIME
        match = _DATA_URL.match(text)
        if match:
            mime_type = match.group("mime").lower()
            text = text[match.end():]
        try:
            payload = ImagePayload(data=base64.b64decode(text, validate=True), mime_type=mime_type)
        except (binascii.Error, ValueError) as exc:
            raise InvalidImageError(f"Image is not valid base64: {exc}") from exc
    if not payload.data:
        raise InvalidImageError("Image payload is empty")
    return payload


class GenerativeClient:
    """Interface the stylist gateway talks to."""

    @property
    def has_credential(self) -> bool:
        raise NotImplementedError

    async def generate_text(self, prompt: str) -> str:
        raise NotImplementedError

    async def generate_structured(self, prompt: str, schema: Any) -> str:
        raise NotImplementedError

    async def generate_from_image(self, image: ImagePayload, prompt: str) -> str:
        raise NotImplementedError


class GeminiClient(GenerativeClient):
    """Gemini-backed client using ``GenerativeModel.generate_content_async``."""

    def __init__(
        self,
        api_key: Optional[str],
        vision_model: str,
        text_model: str,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.api_key = api_key.strip() if api_key and api_key.strip() else None
        self.vision_model = vision_model
        self.text_model = text_model
        self.timeout_seconds = timeout_seconds
        if self.api_key:
            genai.configure(api_key=self.api_key)

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None

    def _require_credential(self) -> None:
        if not self.api_key:
            raise CredentialMissingError("No Gemini API key configured")

    async def _generate(self, model_name: str, contents: Any, mode: str, **kwargs: Any) -> str:
        self._require_credential()
        model = genai.GenerativeModel(model_name)
        start = time.perf_counter()
        try:
            response = await model.generate_content_async(
                contents,
                request_options={"timeout": self.timeout_seconds},
                **kwargs,
            )
            text = response.text
        except Exception as exc:  # noqa: BLE001 - SDK raises transport, quota and blocked-prompt errors
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            log_event(
                LOGGER,
                logging.ERROR,
                "genai_call_failed",
                model=model_name,
                mode=mode,
                duration_ms=duration_ms,
                error=type(exc).__name__,
            )
            raise RemoteCallError(f"{mode} call to {model_name} failed: {exc}") from exc

        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        log_event(
            LOGGER,
            logging.INFO,
            "genai_call_completed",
            model=model_name,
            mode=mode,
            duration_ms=duration_ms,
            response_chars=len(text or ""),
        )
        return text or ""

    async def generate_text(self, prompt: str) -> str:
        return await self._generate(self.text_model, prompt, mode="text")

    async def generate_structured(self, prompt: str, schema: Any) -> str:
        config = genai.GenerationConfig(
            response_mime_type="application/json",
            response_schema=schema,
        )
        return await self._generate(self.text_model, prompt, mode="structured", generation_config=config)

    async def generate_from_image(self, image: ImagePayload, prompt: str) -> str:
        return await self._generate(self.vision_model, [image.as_part(), prompt], mode="image")


__all__ = [
    "GenAIError",
    "CredentialMissingError",
    "RemoteCallError",
    "InvalidImageError",
    "ImagePayload",
    "GenerativeClient",
    "GeminiClient",
    "decode_image",
]
