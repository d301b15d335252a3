"""Smart Closet application bootstrap."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from agents.stylist_gateway import RecommendationResult, StylistGateway, is_fallback_analysis
from closet_app.config import AppConfig
from closet_app.logging_config import configure_logging, get_logger, log_event, operation_context
from logic.messages import message
from logic.wardrobe_stats import category_distribution, item_cost_per_wear, outfit_total_value, total_wears
from memory.chat_history import ChatHistory, ChatMessage
from memory.inspirations import InspirationBoard
from memory.local_storage import JSONFileStorage, LocalStorage
from memory.session_store import SessionStore
from models.catalog import initial_closet, initial_outfits
from models.clothing_item import ClothingItem, PartialClothingItem, new_id
from models.inspiration import SavedInspiration
from models.taxonomy import Category, InspirationFolder, Language, Season, parse_language
from models.weather import WEATHER_MOCK, WeatherSnapshot
from tools.genai_client import GeminiClient, GenerativeClient
from tools.image_fetcher import ImageFetchError, InvalidImageURLError, ProductPageURLError, fetch_image_as_base64
from tools.shopping_links import item_search_urls, query_search_urls
from tools.wardrobe_store import WardrobeStore

LOGGER = get_logger(__name__)


@dataclass
class AddItemOutcome:
    """A freshly added item plus what the UI should tell the user about it."""

    item: ClothingItem
    analysis_failed: bool = False
    notice: Optional[str] = None


class SmartClosetApp:
    """Wires together storage, stores and the stylist gateway."""

    def __init__(
        self,
        config: AppConfig | None = None,
        storage: LocalStorage | None = None,
        client: GenerativeClient | None = None,
        weather: WeatherSnapshot | None = None,
        seed: bool = True,
    ) -> None:
        self.config = config or AppConfig.from_env()
        configure_logging()

        self.storage = storage or JSONFileStorage(self.config.storage_path)
        self.client = client or GeminiClient(
            api_key=self.config.gemini_api_key,
            vision_model=self.config.vision_model,
            text_model=self.config.text_model,
            timeout_seconds=self.config.request_timeout,
        )
        self.gateway = StylistGateway(self.client)
        self.weather = weather or WEATHER_MOCK
        self.default_language = parse_language(self.config.default_language)

        self.wardrobe = WardrobeStore(
            items=initial_closet() if seed else [],
            outfits=initial_outfits() if seed else [],
        )
        self.inspirations = InspirationBoard()
        self.session = SessionStore(self.storage, delay_seconds=self.config.login_delay_seconds)
        self.chat_history = ChatHistory(self.storage)

        self.session.load()
        self.chat_history.load(self.default_language)

    def _language(self, language: Language | str | None) -> Language:
        return parse_language(language) if language else self.default_language

    # Closet

    async def add_item_from_image(
        self,
        image: str | bytes,
        image_url: str,
        language: Language | str | None = None,
        shop_link: str | None = None,
    ) -> AddItemOutcome:
        """Analyze a photo or screenshot and add the resulting item to the closet."""

        lang = self._language(language)
        with operation_context("app:add_item_from_image") as correlation_id:
            analysis = await self.gateway.analyze_image(image, lang)
            item = analysis.to_clothing_item(new_id(), image_url, shop_link=shop_link)
            self.wardrobe.add_item(item)
            failed = is_fallback_analysis(analysis, lang)
            log_event(
                LOGGER,
                logging.INFO,
                "app_item_added",
                method="add_item_from_image",
                correlation_id=correlation_id,
                item_id=item.id,
                category=item.category.value,
                analysis_failed=failed,
            )
            return AddItemOutcome(
                item=item,
                analysis_failed=failed,
                notice=message("analysis_failed", lang) if failed else None,
            )

    async def add_item_from_link(self, url: str, language: Language | str | None = None) -> AddItemOutcome:
        """Add an item from a pasted link.

        Direct image links are downloaded and analyzed. Product pages and
        unreachable links still produce an item with manual defaults so the
        link is not lost.
        """

        lang = self._language(language)
        try:
            image = fetch_image_as_base64(url)
        except ProductPageURLError:
            return self._add_manual_item(url, lang, notice=message("link_page_url", lang), shop_link=url)
        except (ImageFetchError, InvalidImageURLError) as exc:
            log_event(LOGGER, logging.WARNING, "app_link_fetch_failed", error=type(exc).__name__)
            return self._add_manual_item(url, lang, notice=message("link_image_fetch", lang))
        return await self.add_item_from_image(image, image_url=url, language=lang)

    def _add_manual_item(
        self, image_url: str, language: Language, notice: str, shop_link: str | None = None
    ) -> AddItemOutcome:
        manual = PartialClothingItem(
            category=Category.TOP,
            color="Unknown",
            season=Season.ALL,
            description=message("new_item_manual", language),
        )
        item = manual.to_clothing_item(new_id(), image_url, shop_link=shop_link)
        self.wardrobe.add_item(item)
        return AddItemOutcome(item=item, analysis_failed=False, notice=notice)

    def item_cost_per_wear(self, item_id: str) -> Optional[float]:
        item = self.wardrobe.get_item(item_id)
        return item_cost_per_wear(item) if item else None

    def outfit_summary(self, outfit_id: str) -> Optional[Dict[str, object]]:
        outfit = self.wardrobe.get_outfit(outfit_id)
        if outfit is None:
            return None
        items = self.wardrobe.resolve_items(outfit.item_ids)
        return {
            "outfit": outfit,
            "items": items,
            "total_value": outfit_total_value(items),
            "wear_count": outfit.wear_count,
        }

    def closet_stats(self) -> Dict[str, object]:
        items = self.wardrobe.list_items()
        return {
            "item_count": len(items),
            "outfit_count": len(self.wardrobe.list_outfits()),
            "total_wears": total_wears(items),
            "categories": {category.value: count for category, count in category_distribution(items).items()},
        }

    def shopping_links(self, item_id: str, language: Language | str | None = None) -> Optional[Dict[str, str]]:
        item = self.wardrobe.get_item(item_id)
        if item is None:
            return None
        return item_search_urls(item, self._language(language))

    # Stylist

    async def daily_recommendation(
        self, language: Language | str | None = None
    ) -> Tuple[RecommendationResult, List[ClothingItem]]:
        """Recommend today's outfit and resolve the picked ids against the closet."""

        lang = self._language(language)
        items = self.wardrobe.list_items()
        if not items:
            return RecommendationResult(text=message("closet_empty", lang), is_fallback=True), []
        result = await self.gateway.recommend_daily_outfit(items, self.weather, lang)
        resolved = self.wardrobe.resolve_items(result.item_ids)
        if len(resolved) != len(result.item_ids):
            log_event(
                LOGGER,
                logging.INFO,
                "app_recommendation_dropped_ids",
                requested=len(result.item_ids),
                resolved=len(resolved),
            )
        return result, resolved

    async def chat(
        self,
        query: str,
        image: str | None = None,
        language: Language | str | None = None,
    ) -> ChatMessage:
        """Send one user turn to the stylist and record both sides of it."""

        lang = self._language(language)
        if not query.strip() and not image:
            raise ValueError("A chat turn needs a query or an image")
        self.chat_history.append("user", query, image=image)
        reply = await self.gateway.ask_stylist(
            self.wardrobe.list_items(),
            query.strip() or message("chat_default_query", lang),
            image,
            lang,
        )
        return self.chat_history.append("ai", reply)

    def clear_chat(self, language: Language | str | None = None) -> List[ChatMessage]:
        self.chat_history.reset(self._language(language))
        return self.chat_history.messages

    def chat_shopping_links(self, content: str) -> Dict[str, str]:
        """Search links for the user prompt that produced an AI reply."""

        return query_search_urls(self.chat_history.preceding_user_message(content))

    # Inspirations

    def save_inspiration(
        self,
        content: str,
        folder: InspirationFolder | str | None = None,
        tags: List[str] | None = None,
    ) -> SavedInspiration:
        return self.inspirations.save(content, folder=folder, tags=tags)

    def delete_inspiration(self, inspiration_id: str) -> None:
        self.inspirations.delete(inspiration_id)

    def list_inspirations(self, folder: InspirationFolder | str | None = None) -> List[SavedInspiration]:
        return self.inspirations.by_folder(folder)

    def is_inspiration_saved(self, content: str) -> bool:
        return self.inspirations.is_saved(content)


__all__ = ["SmartClosetApp", "AddItemOutcome"]
