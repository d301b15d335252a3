"""Fetch a garment image from a pasted link so it can be analyzed."""

from __future__ import annotations

import base64
import logging
from typing import Optional
from urllib.parse import urlparse

import requests

from closet_app.logging_config import get_logger, log_event

logger = get_logger(__name__)


class InvalidImageURLError(ValueError):
    """Raised when the provided URL is not a valid HTTP or HTTPS URL."""


class ImageFetchError(RuntimeError):
    """Raised when the image cannot be retrieved successfully."""


class ProductPageURLError(ImageFetchError):
    """Raised when the link points at a web page rather than an image."""


def _validate_url(url: str) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise InvalidImageURLError(f"Unsupported or invalid URL: {url}")


def fetch_image_as_base64(url: str, timeout: Optional[float] = 10.0) -> str:
    """Download an image and return it as a ``data:`` URL.

    Args:
        url: HTTP or HTTPS URL pointing directly at an image.
        timeout: Optional network timeout in seconds.

    Raises:
        InvalidImageURLError: If the URL is not HTTP/HTTPS or missing a host.
        ProductPageURLError: If the server answers with HTML instead of an image.
        ImageFetchError: For network issues or non-2xx responses.
    """

    _validate_url(url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        log_event(logger, logging.WARNING, "image_fetch_network_error", error=type(exc).__name__)
        raise ImageFetchError(f"Network error fetching {url}: {exc}") from exc

    if not 200 <= response.status_code < 300:
        log_event(logger, logging.WARNING, "image_fetch_bad_status", status_code=response.status_code)
        raise ImageFetchError(f"Failed to fetch {url}: HTTP {response.status_code}")

    content_type = response.headers.get("Content-Type", "").split(";")[0].strip().lower()
    if content_type in {"text/html", "application/xhtml+xml"}:
        raise ProductPageURLError(f"{url} is a product page, not an image")
    if not content_type.startswith("image/"):
        content_type = "image/jpeg"

    log_event(logger, logging.DEBUG, "image_fetched", content_type=content_type, size=len(response.content))
    encoded = base64.b64encode(response.content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


__all__ = [
    "InvalidImageURLError",
    "ImageFetchError",
    "ProductPageURLError",
    "fetch_image_as_base64",
]
