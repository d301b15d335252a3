"""Recommendation and chat gateway between the closet and Gemini.

Each operation packages wardrobe state into a prompt, calls the remote model
and converts the reply into domain values. The gateway never raises for a
missing credential, a failed call or a malformed reply: it logs the failure
and returns a fixed, localized fallback instead.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TypedDict, Union

from closet_app.logging_config import get_logger, log_event, operation_context
from logic.messages import message
from logic.prompts import build_analysis_prompt, build_recommendation_prompt, build_stylist_prompt
from logic.validation import (
    ImageAnalysisPayload,
    Ok,
    RecommendationPayload,
    parse_model_json,
    strip_emphasis,
)
from models.clothing_item import ClothingItem, PartialClothingItem
from models.taxonomy import Category, Language, Season, parse_language
from models.weather import WeatherSnapshot
from tools.genai_client import (
    GenAIError,
    GenerativeClient,
    ImagePayload,
    InvalidImageError,
    decode_image,
)

LOGGER = get_logger(__name__)

ImageInput = Union[str, bytes, ImagePayload]


class RecommendationSchema(TypedDict):
    itemIds: list[str]
    reasoning: str


class MalformedResponseError(ValueError):
    """The model replied, but not with something the schema accepts."""


@dataclass
class RecommendationResult:
    """Ids picked by the model plus the narrative to show with them.

    ``item_ids`` are unvalidated references; resolve them against the closet
    before display.
    """

    item_ids: List[str] = field(default_factory=list)
    text: str = ""
    is_fallback: bool = False

    def __post_init__(self) -> None:
        if not self.text and not self.item_ids:
            raise ValueError("RecommendationResult needs text when no items are selected")


def fallback_analysis(language: Language, reason_key: str = "analysis_failed") -> PartialClothingItem:
    return PartialClothingItem(
        category=Category.TOP,
        color="Unknown",
        season=Season.ALL,
        description=message(reason_key, language),
    )


def is_fallback_analysis(result: PartialClothingItem, language: Language) -> bool:
    return result.description in {message("analysis_failed", language), message("analysis_no_key", language)}


class StylistGateway:
    """Image analysis, daily recommendation and stylist chat over a GenerativeClient."""

    def __init__(self, client: GenerativeClient) -> None:
        self.client = client

    def _log_fallback(self, method: str, kind: str, correlation_id: str, **details: object) -> None:
        level = logging.INFO if kind == "credential_missing" else logging.WARNING
        log_event(
            LOGGER,
            level,
            "gateway_fallback",
            agent="stylist_gateway",
            method=method,
            failure=kind,
            correlation_id=correlation_id,
            **details,
        )

    async def analyze_image(self, image: ImageInput, language: Union[Language, str]) -> PartialClothingItem:
        """Guess category, color, season and description for a clothing photo."""

        language = parse_language(language)
        with operation_context("gateway:analyze_image") as correlation_id:
            if not self.client.has_credential:
                self._log_fallback("analyze_image", "credential_missing", correlation_id)
                return fallback_analysis(language, "analysis_no_key")

            try:
                payload = decode_image(image)
                raw = await self.client.generate_from_image(payload, build_analysis_prompt(language))
                outcome = parse_model_json(raw, ImageAnalysisPayload)
                if not isinstance(outcome, Ok):
                    raise MalformedResponseError(outcome.reason)
            except InvalidImageError as exc:
                self._log_fallback("analyze_image", "invalid_image", correlation_id, reason=str(exc))
                return fallback_analysis(language)
            except GenAIError as exc:
                self._log_fallback("analyze_image", "remote_call_failure", correlation_id, reason=str(exc))
                return fallback_analysis(language)
            except MalformedResponseError as exc:
                self._log_fallback("analyze_image", "malformed_response", correlation_id, reason=str(exc))
                return fallback_analysis(language)

            parsed = outcome.value
            log_event(
                LOGGER,
                logging.INFO,
                "gateway_call_completed",
                agent="stylist_gateway",
                method="analyze_image",
                correlation_id=correlation_id,
                category=parsed.category.value,
                season=parsed.season.value,
            )
            return PartialClothingItem(
                category=parsed.category,
                color=parsed.color,
                season=parsed.season,
                description=parsed.description,
                brand=parsed.brand,
                price=parsed.price,
                material=parsed.material,
            )

    async def recommend_daily_outfit(
        self,
        items: Sequence[ClothingItem],
        weather: WeatherSnapshot,
        language: Union[Language, str],
    ) -> RecommendationResult:
        """Ask the model to pick 2-4 closet items suited to today's weather."""

        language = parse_language(language)
        with operation_context("gateway:recommend_daily_outfit") as correlation_id:
            if not self.client.has_credential:
                self._log_fallback("recommend_daily_outfit", "credential_missing", correlation_id)
                return RecommendationResult(text=message("recommend_no_key", language), is_fallback=True)

            prompt = build_recommendation_prompt(items, weather, language)
            try:
                raw = await self.client.generate_structured(prompt, RecommendationSchema)
                outcome = parse_model_json(raw, RecommendationPayload)
                if not isinstance(outcome, Ok):
                    raise MalformedResponseError(outcome.reason)
            except GenAIError as exc:
                self._log_fallback("recommend_daily_outfit", "remote_call_failure", correlation_id, reason=str(exc))
                return RecommendationResult(text=message("recommend_offline", language), is_fallback=True)
            except MalformedResponseError as exc:
                self._log_fallback("recommend_daily_outfit", "malformed_response", correlation_id, reason=str(exc))
                return RecommendationResult(text=message("recommend_offline", language), is_fallback=True)

            text = strip_emphasis(outcome.value.reasoning).strip()
            item_ids = list(outcome.value.itemIds)
            log_event(
                LOGGER,
                logging.INFO,
                "gateway_call_completed",
                agent="stylist_gateway",
                method="recommend_daily_outfit",
                correlation_id=correlation_id,
                wardrobe_size=len(items),
                selected=len(item_ids),
            )
            return RecommendationResult(item_ids=item_ids, text=text or message("recommend_empty", language))

    async def ask_stylist(
        self,
        items: Sequence[ClothingItem],
        query: str,
        image: Optional[ImageInput],
        language: Union[Language, str],
    ) -> str:
        """Answer a free-text wardrobe question, optionally about an attached image."""

        language = parse_language(language)
        with operation_context("gateway:ask_stylist") as correlation_id:
            if not self.client.has_credential:
                self._log_fallback("ask_stylist", "credential_missing", correlation_id)
                return message("chat_no_key", language)

            prompt = build_stylist_prompt(items, query, language)
            try:
                if image:
                    text = await self.client.generate_from_image(decode_image(image), prompt)
                    text = text or message("chat_image_empty", language)
                else:
                    text = await self.client.generate_text(prompt)
                    text = text or message("chat_text_empty", language)
            except (GenAIError, InvalidImageError) as exc:
                self._log_fallback("ask_stylist", "remote_call_failure", correlation_id, reason=str(exc))
                return message("chat_failed", language)

            log_event(
                LOGGER,
                logging.INFO,
                "gateway_call_completed",
                agent="stylist_gateway",
                method="ask_stylist",
                correlation_id=correlation_id,
                with_image=bool(image),
                wardrobe_size=len(items),
            )
            return strip_emphasis(text)


__all__ = [
    "StylistGateway",
    "RecommendationResult",
    "RecommendationSchema",
    "MalformedResponseError",
    "fallback_analysis",
    "is_fallback_analysis",
]
