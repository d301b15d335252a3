"""Bookmarked stylist responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as dt_date
from typing import Any, Dict, List

from models.clothing_item import parse_date
from models.taxonomy import InspirationFolder, parse_folder


@dataclass
class SavedInspiration:
    id: str
    content: str
    date: dt_date
    folder: InspirationFolder = InspirationFolder.CHAT
    tags: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.date = parse_date(self.date) or dt_date.today()
        self.folder = parse_folder(self.folder)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "date": self.date.isoformat(),
            "folder": self.folder.value,
            "tags": list(self.tags),
        }


__all__ = ["SavedInspiration"]
