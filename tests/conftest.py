"""Shared fixtures: an offline generative client and a seeded closet."""

from __future__ import annotations

from typing import Any, List, Optional

import pytest

from closet_app.config import AppConfig
from memory.local_storage import InMemoryStorage
from models.clothing_item import ClothingItem
from models.taxonomy import Category, Season
from models.weather import WeatherSnapshot
from tools.genai_client import GenerativeClient, ImagePayload, RemoteCallError


class FakeGenerativeClient(GenerativeClient):
    """Records every call and replays canned replies."""

    def __init__(
        self,
        reply: str = "",
        has_credential: bool = True,
        error: Optional[Exception] = None,
    ) -> None:
        self.reply = reply
        self._has_credential = has_credential
        self.error = error
        self.calls: List[dict] = []

    @property
    def has_credential(self) -> bool:
        return self._has_credential

    def _respond(self, **call: Any) -> str:
        self.calls.append(call)
        if self.error is not None:
            raise self.error
        return self.reply

    async def generate_text(self, prompt: str) -> str:
        return self._respond(mode="text", prompt=prompt)

    async def generate_structured(self, prompt: str, schema: Any) -> str:
        return self._respond(mode="structured", prompt=prompt, schema=schema)

    async def generate_from_image(self, image: ImagePayload, prompt: str) -> str:
        return self._respond(mode="image", prompt=prompt, image=image)


class NoNetworkClient(GenerativeClient):
    """Client without a key that fails the test if the gateway calls it."""

    @property
    def has_credential(self) -> bool:
        return False

    async def generate_text(self, prompt: str) -> str:
        pytest.fail("generate_text must not be called without a credential")

    async def generate_structured(self, prompt: str, schema: Any) -> str:
        pytest.fail("generate_structured must not be called without a credential")

    async def generate_from_image(self, image: ImagePayload, prompt: str) -> str:
        pytest.fail("generate_from_image must not be called without a credential")


@pytest.fixture()
def fake_client_cls() -> type:
    return FakeGenerativeClient


@pytest.fixture()
def no_network_client() -> NoNetworkClient:
    return NoNetworkClient()


@pytest.fixture()
def remote_failure() -> RemoteCallError:
    return RemoteCallError("deadline exceeded")


@pytest.fixture()
def two_item_wardrobe() -> List[ClothingItem]:
    return [
        ClothingItem(
            id="1",
            image_url="https://example.com/tee.jpg",
            category=Category.TOP,
            color="white",
            season=Season.ALL,
            description="white tee",
            wear_count=12,
            price=99,
        ),
        ClothingItem(
            id="2",
            image_url="https://example.com/jeans.jpg",
            category=Category.BOTTOM,
            color="blue",
            season=Season.ALL,
            description="jeans",
            wear_count=25,
        ),
    ]


@pytest.fixture()
def sunny_weather() -> WeatherSnapshot:
    return WeatherSnapshot(temp=26, condition="Sunny", location="Shanghai, CN", uv_index=6, precipitation=20)


@pytest.fixture()
def test_config() -> AppConfig:
    return AppConfig(gemini_api_key="test-key", login_delay_seconds=0, default_language="en")


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()
