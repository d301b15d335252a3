"""Decode-then-validate helpers for untrusted model responses.

Everything the remote model returns is treated as an arbitrary string. It is
unwrapped from markdown fences, JSON-decoded, and checked against a pydantic
schema before a single field reaches the domain model. The outcome is a
tagged value so that callers branch on the failure kind instead of catching.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from models.taxonomy import Category, Season, parse_category, parse_season

T = TypeVar("T", bound=BaseModel)

_FULL_FENCE = re.compile(r"^```[\w+-]*[ \t]*\r?\n?(?P<body>.*?)\r?\n?[ \t]*```$", re.DOTALL)
_INNER_FENCE = re.compile(r"```[\w+-]*[ \t]*\r?\n(?P<body>.*?)```", re.DOTALL)
_STRAY_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)
_EMPHASIS = re.compile(r"\*+")
_PRICE_NUMBER = re.compile(r"\d+(?:\.\d+)?")


class ImageAnalysisPayload(BaseModel):
    """Attributes the model must return for a clothing photo."""

    category: Category
    color: str
    season: Season
    description: str
    brand: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    material: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _closed_category(cls, value: Any) -> Category:
        return parse_category(value)

    @field_validator("season", mode="before")
    @classmethod
    def _closed_season(cls, value: Any) -> Season:
        return parse_season(value)

    @field_validator("color", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value.strip()

    @field_validator("brand", "material", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("price", mode="before")
    @classmethod
    def _lenient_price(cls, value: Any) -> Optional[float]:
        # Screenshot prices come back as "¥299" or "299.00 CNY"; unreadable ones are dropped.
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            number = value
        else:
            match = _PRICE_NUMBER.search(str(value).replace(",", ""))
            if not match:
                return None
            number = match.group()
        try:
            price = float(number)
        except OverflowError:
            return None
        return price if math.isfinite(price) and price >= 0 else None


class RecommendationPayload(BaseModel):
    """Structured output of the daily outfit call."""

    itemIds: List[str]
    reasoning: str

    @field_validator("itemIds", mode="before")
    @classmethod
    def _stringify_ids(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [str(item) if isinstance(item, (int, str)) else item for item in value]
        return value


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class ParseError:
    reason: str


@dataclass(frozen=True)
class SchemaError:
    reason: str


ParseOutcome = Union[Ok[T], ParseError, SchemaError]


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence wrapping around a payload.

    Handles a fence wrapping the whole text (with or without a language tag),
    a fenced block embedded in surrounding prose, and stray fence markers.
    """

    stripped = text.strip()
    match = _FULL_FENCE.match(stripped)
    if match:
        return match.group("body").strip()
    inner = _INNER_FENCE.search(stripped)
    if inner:
        return inner.group("body").strip()
    return _STRAY_FENCE.sub("", stripped).strip()


def strip_emphasis(text: str) -> str:
    """Drop markdown emphasis markers; the UI renders plain text only."""

    return _EMPHASIS.sub("", text)


def _decode_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        start, end = text.find("{"), text.rfind("}")
        if start == -1 or end <= start:
            raise
        return json.loads(text[start : end + 1])


def parse_model_json(raw: Optional[str], schema: Type[T]) -> ParseOutcome[T]:
    """Decode ``raw`` and validate it against ``schema``."""

    if raw is None or not raw.strip():
        return ParseError("empty response")
    cleaned = strip_code_fences(raw)
    try:
        decoded = _decode_json(cleaned)
    except json.JSONDecodeError as exc:
        return ParseError(f"invalid JSON: {exc.msg}")
    except (ValueError, RecursionError) as exc:
        return ParseError(f"undecodable JSON: {exc}")
    if not isinstance(decoded, dict):
        return SchemaError(f"expected a JSON object, got {type(decoded).__name__}")
    try:
        return Ok(schema.model_validate(decoded))
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        return SchemaError(f"schema mismatch on: {fields}")


__all__ = [
    "ImageAnalysisPayload",
    "RecommendationPayload",
    "Ok",
    "ParseError",
    "SchemaError",
    "ParseOutcome",
    "parse_model_json",
    "strip_code_fences",
    "strip_emphasis",
]
