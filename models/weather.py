"""Weather snapshot shown on the home screen."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions; fixed for the lifetime of a session."""

    temp: int
    condition: str
    location: str
    uv_index: int
    precipitation: int
    wind_speed: Optional[float] = None
    humidity: Optional[float] = None

    def __post_init__(self) -> None:
        if not 0 <= self.precipitation <= 100:
            raise ValueError(f"precipitation must be a percentage, got {self.precipitation}")
        if self.uv_index < 0:
            raise ValueError(f"uv_index must be non-negative, got {self.uv_index}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


WEATHER_MOCK = WeatherSnapshot(
    temp=26,
    condition="Partly Cloudy",
    location="Shanghai, CN",
    uv_index=6,
    precipitation=20,
    wind_speed=12,
    humidity=45,
)


__all__ = ["WeatherSnapshot", "WEATHER_MOCK"]
