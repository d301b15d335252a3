"""Canonical taxonomy definitions for the closet.

Categories and seasons are closed sets. Every string coming from a user, the
stored JSON or the remote model goes through :func:`parse_category` and
:func:`parse_season` before it reaches a domain record.
"""

from enum import Enum
from typing import Dict, Union


class Category(str, Enum):
    TOP = "Top"
    BOTTOM = "Bottom"
    SHOES = "Shoes"
    OUTERWEAR = "Outerwear"
    ACCESSORY = "Accessory"
    DRESS = "Dress"


class Season(str, Enum):
    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"
    ALL = "All Year"


class Language(str, Enum):
    ZH = "zh"
    EN = "en"


class InspirationFolder(str, Enum):
    SHOPPING = "shopping"
    OUTFIT = "outfit"
    CHAT = "chat"


def _normalize_key(value: str) -> str:
    """Collapse case, spaces, dashes and underscores for lenient matching."""

    return "".join(ch for ch in value.strip().lower() if ch not in " _-")


_CATEGORY_LOOKUP: Dict[str, Category] = {_normalize_key(c.value): c for c in Category}
_SEASON_LOOKUP: Dict[str, Season] = {_normalize_key(s.value): s for s in Season}
_SEASON_LOOKUP["fall"] = Season.AUTUMN

CATEGORY_LABELS: Dict[Language, Dict[Category, str]] = {
    Language.ZH: {
        Category.TOP: "上装",
        Category.BOTTOM: "下装",
        Category.SHOES: "鞋履",
        Category.OUTERWEAR: "外套",
        Category.ACCESSORY: "配饰",
        Category.DRESS: "连衣裙",
    },
    Language.EN: {category: category.value for category in Category},
}


def parse_category(value: Union[str, Category]) -> Category:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the value is not one of the six
    canonical categories.
    """

    if isinstance(value, Category):
        return value
    category = _CATEGORY_LOOKUP.get(_normalize_key(str(value)))
    if category is None:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {[c.value for c in Category]}")
    return category


def parse_season(value: Union[str, Season]) -> Season:
    """Validate a season value, mapping the "All Year" spellings to ``Season.ALL``."""

    if isinstance(value, Season):
        return value
    season = _SEASON_LOOKUP.get(_normalize_key(str(value)))
    if season is None:
        raise ValueError(f"Unsupported season '{value}'. Allowed: {[s.value for s in Season]}")
    return season


def parse_language(value: Union[str, Language]) -> Language:
    if isinstance(value, Language):
        return value
    try:
        return Language(str(value).strip().lower())
    except ValueError as exc:
        raise ValueError(f"Unsupported language '{value}'. Allowed: zh, en") from exc


def parse_folder(value: Union[str, InspirationFolder, None]) -> InspirationFolder:
    """Map a folder name to :class:`InspirationFolder`, defaulting to chat."""

    if isinstance(value, InspirationFolder):
        return value
    if not value:
        return InspirationFolder.CHAT
    return InspirationFolder(str(value).strip().lower())


def category_label(category: Category, language: Language) -> str:
    return CATEGORY_LABELS[language][category]


__all__ = [
    "Category",
    "Season",
    "Language",
    "InspirationFolder",
    "CATEGORY_LABELS",
    "parse_category",
    "parse_season",
    "parse_language",
    "parse_folder",
    "category_label",
]
