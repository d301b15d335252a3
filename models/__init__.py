"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.clothing_item import ClothingItem, PartialClothingItem, new_id
from models.inspiration import SavedInspiration
from models.outfit import SavedOutfit
from models.user import User
from models.weather import WEATHER_MOCK, WeatherSnapshot

__all__ = [
    "ClothingItem",
    "PartialClothingItem",
    "SavedInspiration",
    "SavedOutfit",
    "User",
    "WeatherSnapshot",
    "WEATHER_MOCK",
    "new_id",
]
