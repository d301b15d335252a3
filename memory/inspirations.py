"""Saved inspirations owned by the top-level application state."""
from __future__ import annotations

from datetime import date
from typing import Iterable, List

from models.clothing_item import new_id
from models.inspiration import SavedInspiration
from models.taxonomy import InspirationFolder, parse_folder


class InspirationBoard:
    """Most-recent-first list of bookmarked stylist replies."""

    def __init__(self) -> None:
        self._items: List[SavedInspiration] = []

    def save(
        self,
        content: str,
        folder: InspirationFolder | str | None = None,
        tags: Iterable[str] | None = None,
        day: date | None = None,
    ) -> SavedInspiration:
        inspiration = SavedInspiration(
            id=new_id(),
            content=content,
            date=day or date.today(),
            folder=parse_folder(folder),
            tags=list(tags or []),
        )
        self._items.insert(0, inspiration)
        return inspiration

    def delete(self, inspiration_id: str) -> None:
        self._items = [item for item in self._items if item.id != inspiration_id]

    def by_folder(self, folder: InspirationFolder | str | None = None) -> List[SavedInspiration]:
        if folder is None:
            return list(self._items)
        wanted = parse_folder(folder)
        return [item for item in self._items if item.folder == wanted]

    def is_saved(self, content: str) -> bool:
        return any(item.content == content for item in self._items)


__all__ = ["InspirationBoard"]
