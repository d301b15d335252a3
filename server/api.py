"""FastAPI server exposing the closet, session and stylist endpoints."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel, Field

from closet_app.app import SmartClosetApp
from closet_app.logging_config import configure_logging
from models.clothing_item import ClothingItem, new_id
from models.outfit import SavedOutfit
from models.taxonomy import Category, InspirationFolder, Language, Season


class ItemPayload(BaseModel):
    """Request payload for creating or replacing a clothing item."""

    image_url: str
    category: Category
    color: str
    season: Season
    description: str
    wear_count: int = Field(0, ge=0)
    brand: Optional[str] = None
    material: Optional[str] = None
    purchase_date: Optional[date] = None
    price: Optional[float] = Field(None, ge=0)
    shop_link: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    care_instructions: List[str] = Field(default_factory=list)
    is_archived: bool = False


class AnalyzeRequest(BaseModel):
    image_base64: str = Field(..., description="Base64 image or data URL")
    image_url: Optional[str] = Field(None, description="Where the image is displayed from")
    language: Optional[Language] = None


class LinkRequest(BaseModel):
    url: str
    language: Optional[Language] = None


class OutfitPayload(BaseModel):
    name: str = Field(..., min_length=1)
    item_ids: List[str] = Field(..., min_length=1)
    description: Optional[str] = None
    occasion: Optional[str] = None
    wear_dates: List[date] = Field(default_factory=list)


class ChatRequest(BaseModel):
    query: str = ""
    image_base64: Optional[str] = None
    language: Optional[Language] = None


class LoginRequest(BaseModel):
    email_or_phone: str
    password: str


class RegisterRequest(LoginRequest):
    name: str


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    avatar: Optional[str] = None
    height: Optional[float] = Field(None, gt=0)
    weight: Optional[float] = Field(None, gt=0)
    size: Optional[str] = None


class InspirationRequest(BaseModel):
    content: str = Field(..., min_length=1)
    folder: InspirationFolder = InspirationFolder.CHAT
    tags: List[str] = Field(default_factory=list)


def create_app(closet: SmartClosetApp | None = None) -> FastAPI:
    """Build the FastAPI app around a :class:`SmartClosetApp`."""

    closet = closet or SmartClosetApp()
    api = FastAPI(title="Smart Closet", version="0.1.0")
    api.state.closet = closet

    def _item_or_404(item_id: str) -> ClothingItem:
        item = closet.wardrobe.get_item(item_id)
        if item is None:
            raise HTTPException(status_code=404, detail=f"Unknown item {item_id}")
        return item

    def _outfit_or_404(outfit_id: str) -> SavedOutfit:
        outfit = closet.wardrobe.get_outfit(outfit_id)
        if outfit is None:
            raise HTTPException(status_code=404, detail=f"Unknown outfit {outfit_id}")
        return outfit

    @api.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "smart-closet",
            "environment": closet.config.environment or "local",
            "ai_enabled": closet.client.has_credential,
        }

    @api.get("/weather")
    async def weather() -> dict:
        return closet.weather.to_dict()

    # Items

    @api.get("/items")
    async def list_items(category: Optional[str] = None, season: Optional[str] = None) -> list:
        try:
            items = closet.wardrobe.filter_items(category=category, season=season)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return [item.to_dict() for item in items]

    @api.post("/items", status_code=201)
    async def create_item(payload: ItemPayload) -> dict:
        item = ClothingItem(id=new_id(), **payload.model_dump())
        closet.wardrobe.add_item(item)
        return item.to_dict()

    @api.get("/items/{item_id}")
    async def get_item(item_id: str) -> dict:
        item = _item_or_404(item_id)
        return {**item.to_dict(), "cost_per_wear": closet.item_cost_per_wear(item_id)}

    @api.put("/items/{item_id}")
    async def update_item(item_id: str, payload: ItemPayload) -> dict:
        _item_or_404(item_id)
        item = ClothingItem(id=item_id, **payload.model_dump())
        closet.wardrobe.update_item(item)
        return item.to_dict()

    @api.delete("/items/{item_id}", status_code=204)
    async def delete_item(item_id: str) -> Response:
        closet.wardrobe.delete_item(item_id)
        return Response(status_code=204)

    @api.get("/items/{item_id}/shopping")
    async def item_shopping(item_id: str, language: Optional[Language] = None) -> dict:
        _item_or_404(item_id)
        return closet.shopping_links(item_id, language)

    @api.post("/items/analyze", status_code=201)
    async def analyze_item(request: AnalyzeRequest) -> dict:
        outcome = await closet.add_item_from_image(
            request.image_base64,
            image_url=request.image_url or request.image_base64,
            language=request.language,
        )
        return {"item": outcome.item.to_dict(), "analysis_failed": outcome.analysis_failed, "notice": outcome.notice}

    @api.post("/items/from-link", status_code=201)
    async def item_from_link(request: LinkRequest) -> dict:
        outcome = await closet.add_item_from_link(request.url, language=request.language)
        return {"item": outcome.item.to_dict(), "analysis_failed": outcome.analysis_failed, "notice": outcome.notice}

    # Outfits

    @api.get("/outfits")
    async def list_outfits() -> list:
        return [outfit.to_dict() for outfit in closet.wardrobe.list_outfits()]

    @api.post("/outfits", status_code=201)
    async def create_outfit(payload: OutfitPayload) -> dict:
        outfit = SavedOutfit(id=new_id(), **payload.model_dump())
        closet.wardrobe.add_outfit(outfit)
        return outfit.to_dict()

    @api.get("/outfits/{outfit_id}")
    async def get_outfit(outfit_id: str) -> dict:
        _outfit_or_404(outfit_id)
        summary = closet.outfit_summary(outfit_id)
        return {
            **summary["outfit"].to_dict(),
            "items": [item.to_dict() for item in summary["items"]],
            "total_value": summary["total_value"],
            "wear_count": summary["wear_count"],
        }

    @api.put("/outfits/{outfit_id}")
    async def update_outfit(outfit_id: str, payload: OutfitPayload) -> dict:
        _outfit_or_404(outfit_id)
        outfit = SavedOutfit(id=outfit_id, **payload.model_dump())
        closet.wardrobe.update_outfit(outfit)
        return outfit.to_dict()

    @api.delete("/outfits/{outfit_id}", status_code=204)
    async def delete_outfit(outfit_id: str) -> Response:
        closet.wardrobe.delete_outfit(outfit_id)
        return Response(status_code=204)

    @api.post("/outfits/{outfit_id}/wear")
    async def log_outfit_wear(outfit_id: str) -> dict:
        outfit = _outfit_or_404(outfit_id)
        outfit.log_wear()
        return outfit.to_dict()

    @api.delete("/outfits/{outfit_id}/wear")
    async def undo_outfit_wear(outfit_id: str) -> dict:
        outfit = _outfit_or_404(outfit_id)
        outfit.undo_wear()
        return outfit.to_dict()

    # Stylist

    @api.get("/recommendation")
    async def recommendation(language: Optional[Language] = None) -> dict:
        result, items = await closet.daily_recommendation(language)
        return {
            "item_ids": result.item_ids,
            "text": result.text,
            "items": [item.to_dict() for item in items],
        }

    @api.get("/chat")
    async def chat_history() -> list:
        return [entry.to_dict() for entry in closet.chat_history.messages]

    @api.post("/chat")
    async def chat(request: ChatRequest) -> dict:
        try:
            reply = await closet.chat(request.query, image=request.image_base64, language=request.language)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return reply.to_dict()

    @api.delete("/chat")
    async def clear_chat(language: Optional[Language] = None) -> list:
        return [entry.to_dict() for entry in closet.clear_chat(language)]

    # Session

    @api.post("/auth/login")
    async def login(request: LoginRequest) -> dict:
        if not await closet.session.login(request.email_or_phone, request.password):
            raise HTTPException(status_code=401, detail="Login failed")
        return closet.session.current_user.to_dict()

    @api.post("/auth/register", status_code=201)
    async def register(request: RegisterRequest) -> dict:
        if not await closet.session.register(request.name, request.email_or_phone, request.password):
            raise HTTPException(status_code=400, detail="Registration failed")
        return closet.session.current_user.to_dict()

    @api.post("/auth/logout", status_code=204)
    async def logout() -> Response:
        closet.session.logout()
        return Response(status_code=204)

    @api.get("/auth/me")
    async def me() -> dict:
        user = closet.session.current_user
        if user is None:
            raise HTTPException(status_code=401, detail="Not signed in")
        return user.to_dict()

    @api.patch("/auth/profile")
    async def update_profile(request: ProfileUpdate) -> dict:
        updated = await closet.session.update_profile(**request.model_dump(exclude_unset=True))
        if updated is None:
            raise HTTPException(status_code=401, detail="Not signed in")
        return updated.to_dict()

    # Inspirations

    @api.get("/inspirations")
    async def list_inspirations(folder: Optional[InspirationFolder] = None) -> list:
        return [entry.to_dict() for entry in closet.list_inspirations(folder)]

    @api.post("/inspirations", status_code=201)
    async def save_inspiration(request: InspirationRequest) -> dict:
        return closet.save_inspiration(request.content, folder=request.folder, tags=request.tags).to_dict()

    @api.delete("/inspirations/{inspiration_id}", status_code=204)
    async def delete_inspiration(inspiration_id: str) -> Response:
        closet.delete_inspiration(inspiration_id)
        return Response(status_code=204)

    @api.get("/stats")
    async def stats() -> dict:
        return closet.closet_stats()

    return api


def get_app() -> FastAPI:
    """Expose a configured FastAPI instance for ASGI servers."""

    configure_logging()
    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
