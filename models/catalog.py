"""Starter closet shown to a fresh session."""

from __future__ import annotations

from typing import List

from models.clothing_item import ClothingItem
from models.outfit import SavedOutfit
from models.taxonomy import Category, Season


def initial_closet() -> List[ClothingItem]:
    return [
        ClothingItem(
            id="1",
            image_url="https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400&q=80",
            category=Category.TOP,
            color="white",
            season=Season.ALL,
            description="Basic cotton white tee",
            wear_count=12,
            price=99,
            rating=5,
            brand="Uniqlo",
            care_instructions=["Machine Wash Cold", "Tumble Dry Low"],
        ),
        ClothingItem(
            id="2",
            image_url="https://images.unsplash.com/photo-1542272454315-4c01d7abdf4a?w=400&q=80",
            category=Category.BOTTOM,
            color="blue",
            season=Season.ALL,
            description="Classic straight-leg denim jeans",
            wear_count=25,
            price=299,
            rating=4,
            brand="Levi's",
            care_instructions=["Wash Less", "Inside Out"],
        ),
        ClothingItem(
            id="3",
            image_url="https://images.unsplash.com/photo-1591047139829-d91aecb6caea?w=400&q=80",
            category=Category.OUTERWEAR,
            color="beige",
            season=Season.AUTUMN,
            description="Double-breasted trench coat",
            wear_count=5,
            price=899,
            rating=5,
            brand="Burberry",
            purchase_date="2023-10-01",
        ),
        ClothingItem(
            id="4",
            image_url="https://images.unsplash.com/photo-1549298916-b41d501d3772?w=400&q=80",
            category=Category.SHOES,
            color="white",
            season=Season.ALL,
            description="Everyday white sneakers",
            wear_count=30,
            price=599,
            rating=4,
        ),
        ClothingItem(
            id="5",
            image_url="https://images.unsplash.com/photo-1551028919-ac66e6a39d44?w=400&q=80",
            category=Category.OUTERWEAR,
            color="black",
            season=Season.WINTER,
            description="Leather biker jacket",
            wear_count=8,
            price=1200,
            rating=5,
        ),
        ClothingItem(
            id="6",
            image_url="https://images.unsplash.com/photo-1596755094514-f87e34085b2c?w=400&q=80",
            category=Category.TOP,
            color="red",
            season=Season.SUMMER,
            description="French vintage shirt",
            wear_count=3,
            price=150,
            rating=3,
        ),
    ]


def initial_outfits() -> List[SavedOutfit]:
    return [
        SavedOutfit(
            id="outfit-1",
            name="Weekend casual",
            description="Relaxed look for a walk in the park or a coffee run.",
            item_ids=["1", "2", "4"],
            wear_dates=["2023-11-10", "2023-11-18"],
        )
    ]


__all__ = ["initial_closet", "initial_outfits"]
