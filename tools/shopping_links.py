"""Search links for buying an item similar to one in the closet."""

from __future__ import annotations

from enum import Enum
from typing import Dict
from urllib.parse import quote

from models.clothing_item import ClothingItem
from models.taxonomy import Language, category_label


class ShoppingPlatform(str, Enum):
    TAOBAO = "taobao"
    JD = "jd"


_SEARCH_TEMPLATES: Dict[ShoppingPlatform, str] = {
    ShoppingPlatform.TAOBAO: "https://s.taobao.com/search?q={query}",
    ShoppingPlatform.JD: "https://search.jd.com/Search?keyword={query}",
}
DEFAULT_CHAT_KEYWORD = "Style Match"


def item_keywords(item: ClothingItem, language: Language) -> str:
    """Brand, color, description and localized category, space separated."""

    parts = [item.brand or "", item.color, item.description, category_label(item.category, language)]
    return " ".join(part.strip() for part in parts if part and part.strip())


def search_url(query: str, platform: ShoppingPlatform | str) -> str:
    platform = ShoppingPlatform(platform)
    return _SEARCH_TEMPLATES[platform].format(query=quote(query.strip(), safe=""))


def item_search_urls(item: ClothingItem, language: Language) -> Dict[str, str]:
    keywords = item_keywords(item, language)
    return {platform.value: search_url(keywords, platform) for platform in ShoppingPlatform}


def query_search_urls(query: str | None) -> Dict[str, str]:
    """Links for a free-text chat prompt, falling back to a generic keyword."""

    keyword = (query or "").strip() or DEFAULT_CHAT_KEYWORD
    return {platform.value: search_url(keyword, platform) for platform in ShoppingPlatform}


__all__ = [
    "ShoppingPlatform",
    "item_keywords",
    "search_url",
    "item_search_urls",
    "query_search_urls",
]
