"""Clothing item data model and helpers."""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Union

from models.taxonomy import Category, Season, parse_category, parse_season


def new_id() -> str:
    """Return a fresh opaque identifier for items, outfits and messages."""

    return uuid.uuid4().hex


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Coerce an ISO ``YYYY-MM-DD`` string into a :class:`date`."""

    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


@dataclass
class ClothingItem:
    """Represents one garment in the user's closet."""

    id: str
    image_url: str
    category: Category
    color: str
    season: Season
    description: str
    wear_count: int = 0
    brand: Optional[str] = None
    material: Optional[str] = None
    purchase_date: Optional[date] = None
    price: Optional[float] = None
    shop_link: Optional[str] = None
    rating: Optional[int] = None
    care_instructions: List[str] = field(default_factory=list)
    is_archived: bool = False

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ClothingItem requires a non-empty id")
        self.category = parse_category(self.category)
        self.season = parse_season(self.season)
        self.wear_count = int(self.wear_count)
        if self.wear_count < 0:
            raise ValueError(f"wear_count must be non-negative, got {self.wear_count}")
        if self.price is not None:
            self.price = float(self.price)
            if self.price < 0:
                raise ValueError(f"price must be non-negative, got {self.price}")
        if self.rating is not None:
            self.rating = int(self.rating)
            if not 1 <= self.rating <= 5:
                raise ValueError(f"rating must be between 1 and 5, got {self.rating}")
        self.purchase_date = parse_date(self.purchase_date)
        self.care_instructions = [str(c).strip() for c in _ensure_list(self.care_instructions) if str(c).strip()]
        self.is_archived = bool(self.is_archived)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["category"] = self.category.value
        payload["season"] = self.season.value
        payload["purchase_date"] = self.purchase_date.isoformat() if self.purchase_date else None
        return payload

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ClothingItem":
        known = {key: value for key, value in payload.items() if key in cls.__dataclass_fields__}
        return cls(**known)


@dataclass
class PartialClothingItem:
    """Attributes guessed from a photo or product screenshot."""

    category: Category
    color: str
    season: Season
    description: str
    brand: Optional[str] = None
    price: Optional[float] = None
    material: Optional[str] = None

    def __post_init__(self) -> None:
        self.category = parse_category(self.category)
        self.season = parse_season(self.season)
        if self.price is not None:
            self.price = float(self.price)
            if self.price < 0:
                raise ValueError(f"price must be non-negative, got {self.price}")

    def to_clothing_item(self, item_id: str, image_url: str, **extra: Any) -> ClothingItem:
        """Build a brand new closet item that has never been worn."""

        return ClothingItem(
            id=item_id,
            image_url=image_url,
            category=self.category,
            color=self.color or "Unknown",
            season=self.season,
            description=self.description or "New Item",
            wear_count=0,
            brand=self.brand,
            material=self.material,
            price=self.price,
            **extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["category"] = self.category.value
        payload["season"] = self.season.value
        return payload


__all__ = ["ClothingItem", "PartialClothingItem", "new_id", "parse_date"]
