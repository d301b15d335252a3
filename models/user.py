"""User profile record persisted by the session store."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


@dataclass
class User:
    id: str
    name: str
    email_or_phone: str
    avatar: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    size: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("User requires a non-empty id")
        if not self.email_or_phone:
            raise ValueError("User requires an email or phone number")
        for attr in ("height", "weight"):
            value = getattr(self, attr)
            if value is not None and value <= 0:
                raise ValueError(f"{attr} must be positive, got {value}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "User":
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in payload.items() if key in names})


__all__ = ["User"]
