"""Closet statistics shown on item, outfit and profile screens."""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Optional

from models.clothing_item import ClothingItem
from models.taxonomy import Category

logger = logging.getLogger(__name__)


def cost_per_wear(price: Optional[float], wear_count: int) -> float:
    """Price divided by wears, to one decimal; the full price when never worn.

    Halves round up, so 99 over 12 wears is 8.3.
    """

    amount = float(price or 0)
    if wear_count <= 0:
        return amount
    per_wear = Decimal(str(amount)) / Decimal(wear_count)
    return float(per_wear.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def item_cost_per_wear(item: ClothingItem) -> float:
    return cost_per_wear(item.price, item.wear_count)


def outfit_total_value(items: Iterable[ClothingItem]) -> float:
    """Sum of the prices that are set; a missing price counts as zero."""

    return float(sum(item.price or 0 for item in items))


def category_distribution(items: Iterable[ClothingItem]) -> Dict[Category, int]:
    """Count items per category in canonical order, omitting empty categories."""

    counts = {category: 0 for category in Category}
    for item in items:
        counts[item.category] += 1
    distribution = {category: count for category, count in counts.items() if count > 0}
    logger.debug("category distribution %s", {c.value: n for c, n in distribution.items()})
    return distribution


def total_wears(items: Iterable[ClothingItem]) -> int:
    return sum(item.wear_count for item in items)


__all__ = [
    "cost_per_wear",
    "item_cost_per_wear",
    "outfit_total_value",
    "category_distribution",
    "total_wears",
]
