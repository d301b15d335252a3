"""Prompt builders for the stylist gateway."""

from __future__ import annotations

from typing import Iterable

from models.clothing_item import ClothingItem
from models.taxonomy import Category, Language, Season
from models.weather import WeatherSnapshot

_LANGUAGE_NAMES = {
    Language.ZH: "Chinese (Simplified)",
    Language.EN: "English",
}
_COLOR_LANGUAGE = {
    Language.ZH: "Chinese",
    Language.EN: "English",
}


def language_name(language: Language) -> str:
    return _LANGUAGE_NAMES[language]


def summarize_for_recommendation(items: Iterable[ClothingItem]) -> str:
    """One line per item, leading with the id so the model can cite it."""

    return "\n".join(
        f"ID: {item.id} | {item.color} {item.season.value} {item.category.value} ({item.description})"
        for item in items
    )


def summarize_for_search(items: Iterable[ClothingItem]) -> str:
    return "\n".join(f"- {item.color} {item.description} (ID: {item.id})" for item in items)


def build_analysis_prompt(language: Language) -> str:
    categories = ", ".join(category.value for category in Category)
    seasons = ", ".join(season.value for season in Season)
    return (
        "Analyze this clothing image (or screenshot of product page).\n"
        "If it is a screenshot, try to extract the brand, price, and material text.\n"
        "Return a valid JSON object (NO markdown code blocks, just raw JSON) with:\n"
        f"- 'category' (Must be one of: {categories})\n"
        f"- 'color' (Use {_COLOR_LANGUAGE[language]})\n"
        f"- 'season' (Must be one of: {seasons})\n"
        f"- 'description' (A short, descriptive name in {language_name(language)})\n"
        "- 'brand' (Brand name if visible or inferable, e.g. Uniqlo, Nike. else null)\n"
        "- 'price' (Number only, if visible in screenshot. else null)\n"
        "- 'material' (Fabric material if visible, e.g. \"100% Cotton\", \"Denim\". else null)\n"
    )


def build_recommendation_prompt(
    items: Iterable[ClothingItem], weather: WeatherSnapshot, language: Language
) -> str:
    return f"""You are a trendy fashion blogger and professional stylist.
Language: {language_name(language)}.

Current Weather Details:
- Temp: {weather.temp}°C, {weather.condition}
- Precipitation Probability: {weather.precipitation}%
- UV Index: {weather.uv_index}

Available Wardrobe:
{summarize_for_recommendation(items)}

Suggest ONE detailed outfit combination from the available wardrobe.

Tone and style:
1. Start with a short, punchy headline.
2. Describe the vibe and the scenario the look suits, not just the items.
3. Use emojis to keep it friendly.
4. End with 2-3 relevant hashtags.
5. Short paragraphs (max 2 sentences each) separated by blank lines.

Weather rules:
- If precipitation is above 40%: prefer boots or water-resistant shoes and suggest an umbrella.
- If the UV index is above 6: suggest sunglasses or a hat.
- Match layers to the temperature.

Format rules:
- Select 2-4 items (Top, Bottom, Shoes, etc.) by their ID.
- Do NOT use markdown formatting (asterisks, bolding). Keep it plain text.

Return a JSON object with:
- "itemIds": Array of strings.
- "reasoning": String (the stylist text).
"""


def build_stylist_prompt(items: Iterable[ClothingItem], query: str, language: Language) -> str:
    return f"""You are a popular fashion blogger and stylist.
User Query: "{query}"
Language: {language_name(language)}.

Your goal: act as a digital wardrobe search engine. The user might ask for a
style (e.g. "Korean Minimalist", "Old Money"), a celebrity look, an occasion or
a specific item.

User's Wardrobe (SEARCH THIS LIST):
{summarize_for_search(items)}

Instructions:
1. Search and match: look through the wardrobe list and pick the items that fit the requested vibe.
2. If the user asks for a look or an occasion, present the best matches from their existing clothes.
3. Tone: enthusiastic, warm, professional. Use emojis.
4. Short paragraphs (max 2 sentences) separated by blank lines.

Output rules:
- If you find matching items, mention them explicitly by name and color.
- If nothing matches, suggest what kind of item to buy to complete the look.
- Do NOT use markdown formatting like bold or italics. Plain text only.
"""


__all__ = [
    "build_analysis_prompt",
    "build_recommendation_prompt",
    "build_stylist_prompt",
    "language_name",
    "summarize_for_recommendation",
    "summarize_for_search",
]
