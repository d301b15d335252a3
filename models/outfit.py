"""Saved outfit model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from models.clothing_item import parse_date


@dataclass
class SavedOutfit:
    """A named combination of closet items.

    ``item_ids`` may reference items that were deleted since the outfit was
    saved; those are dropped when the outfit is resolved for display.
    """

    id: str
    name: str
    item_ids: List[str] = field(default_factory=list)
    description: Optional[str] = None
    occasion: Optional[str] = None
    wear_dates: List[date] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.item_ids = [str(item_id) for item_id in self.item_ids]
        self.wear_dates = [parse_date(day) for day in self.wear_dates or []]

    @property
    def wear_count(self) -> int:
        return len(self.wear_dates)

    def log_wear(self, day: date | None = None) -> None:
        self.wear_dates.append(day or date.today())

    def undo_wear(self) -> None:
        if self.wear_dates:
            self.wear_dates.pop()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "item_ids": list(self.item_ids),
            "description": self.description,
            "occasion": self.occasion,
            "wear_dates": [day.isoformat() for day in self.wear_dates],
        }


__all__ = ["SavedOutfit"]
