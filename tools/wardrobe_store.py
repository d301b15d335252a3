"""In-memory wardrobe store: the single source of truth for closet contents."""
from __future__ import annotations

from typing import Iterable, List, Optional, Union

from models.clothing_item import ClothingItem
from models.outfit import SavedOutfit
from models.taxonomy import Category, Season, parse_category, parse_season

ALL_FILTER = "All"


class WardrobeStore:
    """Holds clothing items and saved outfits for one session.

    Every mutation is total: updating or deleting an unknown id is a no-op.
    New entries are prepended so lists read most-recent-first.
    """

    def __init__(
        self,
        items: Iterable[ClothingItem] | None = None,
        outfits: Iterable[SavedOutfit] | None = None,
    ) -> None:
        self._items: List[ClothingItem] = list(items or [])
        self._outfits: List[SavedOutfit] = list(outfits or [])

    # Items

    def add_item(self, item: ClothingItem) -> ClothingItem:
        self._items.insert(0, item)
        return item

    def update_item(self, item: ClothingItem) -> None:
        self._items = [item if existing.id == item.id else existing for existing in self._items]

    def delete_item(self, item_id: str) -> None:
        self._items = [existing for existing in self._items if existing.id != item_id]

    def get_item(self, item_id: str) -> Optional[ClothingItem]:
        return next((item for item in self._items if item.id == item_id), None)

    def list_items(self) -> List[ClothingItem]:
        return list(self._items)

    def filter_items(
        self,
        category: Union[Category, str, None] = None,
        season: Union[Season, str, None] = None,
        include_archived: bool = True,
    ) -> List[ClothingItem]:
        """Filter by category and season; ``None`` or ``"All"`` disables a filter."""

        category_key = None if category in (None, ALL_FILTER) else parse_category(category)
        season_key = None if season in (None, ALL_FILTER) else parse_season(season)

        def matches(item: ClothingItem) -> bool:
            if category_key and item.category != category_key:
                return False
            if season_key and item.season != season_key:
                return False
            if not include_archived and item.is_archived:
                return False
            return True

        return [item for item in self._items if matches(item)]

    def resolve_items(self, item_ids: Iterable[str]) -> List[ClothingItem]:
        """Map ids to items in order, silently dropping ids not in the closet."""

        resolved: List[ClothingItem] = []
        for item_id in item_ids:
            item = self.get_item(item_id)
            if item is not None:
                resolved.append(item)
        return resolved

    # Outfits

    def add_outfit(self, outfit: SavedOutfit) -> SavedOutfit:
        self._outfits.insert(0, outfit)
        return outfit

    def update_outfit(self, outfit: SavedOutfit) -> None:
        self._outfits = [outfit if existing.id == outfit.id else existing for existing in self._outfits]

    def delete_outfit(self, outfit_id: str) -> None:
        self._outfits = [existing for existing in self._outfits if existing.id != outfit_id]

    def get_outfit(self, outfit_id: str) -> Optional[SavedOutfit]:
        return next((outfit for outfit in self._outfits if outfit.id == outfit_id), None)

    def list_outfits(self) -> List[SavedOutfit]:
        return list(self._outfits)


__all__ = ["WardrobeStore", "ALL_FILTER"]
