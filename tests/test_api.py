"""HTTP surface tests using FastAPI's TestClient."""

import base64
import json

import pytest
from fastapi.testclient import TestClient

from closet_app.app import SmartClosetApp
from server.api import create_app

IMAGE_B64 = base64.b64encode(b"jpeg-bytes").decode("ascii")


@pytest.fixture()
def fake_client(fake_client_cls):
    return fake_client_cls(reply=json.dumps({"itemIds": ["1", "2", "99"], "reasoning": "Classic *denim* day"}))


@pytest.fixture()
def client(test_config, storage, fake_client):
    closet = SmartClosetApp(config=test_config, storage=storage, client=fake_client)
    return TestClient(create_app(closet))


def _item_body(**overrides):
    body = {
        "image_url": "https://example.com/skirt.jpg",
        "category": "Bottom",
        "color": "black",
        "season": "Autumn",
        "description": "Pleated midi skirt",
        "price": 259,
    }
    body.update(overrides)
    return body


def test_healthcheck_reports_ai_status(client):
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["ai_enabled"] is True


def test_weather_is_the_fixed_snapshot(client):
    assert client.get("/weather").json()["location"] == "Shanghai, CN"


def test_item_crud_flow(client):
    created = client.post("/items", json=_item_body())
    assert created.status_code == 201
    item_id = created.json()["id"]
    assert client.get("/items").json()[0]["id"] == item_id

    fetched = client.get(f"/items/{item_id}").json()
    assert fetched["cost_per_wear"] == 259.0

    updated = client.put(f"/items/{item_id}", json=_item_body(wear_count=2))
    assert updated.json()["wear_count"] == 2

    assert client.delete(f"/items/{item_id}").status_code == 204
    assert client.delete(f"/items/{item_id}").status_code == 204
    assert client.get(f"/items/{item_id}").status_code == 404


def test_item_validation_errors(client):
    assert client.post("/items", json=_item_body(category="Hat")).status_code == 422
    assert client.post("/items", json=_item_body(price=-1)).status_code == 422
    assert client.post("/items", json=_item_body(rating=9)).status_code == 422
    assert client.put("/items/missing", json=_item_body()).status_code == 404


def test_item_filters(client):
    outerwear = client.get("/items", params={"category": "Outerwear"}).json()
    winter = client.get("/items", params={"category": "All", "season": "Winter"}).json()

    assert {item["id"] for item in outerwear} == {"3", "5"}
    assert [item["id"] for item in winter] == ["5"]
    assert client.get("/items", params={"category": "Hat"}).status_code == 400


def test_item_shopping_links(client):
    links = client.get("/items/2/shopping", params={"language": "en"}).json()

    assert links["jd"].startswith("https://search.jd.com/Search?keyword=Levi")
    assert client.get("/items/missing/shopping").status_code == 404


def test_analyze_endpoint_adds_item(client, fake_client):
    fake_client.reply = json.dumps(
        {"category": "Dress", "color": "green", "season": "Summer", "description": "Linen dress"}
    )

    response = client.post("/items/analyze", json={"image_base64": IMAGE_B64, "image_url": "https://example.com/d.jpg"})

    body = response.json()
    assert response.status_code == 201
    assert body["analysis_failed"] is False
    assert body["item"]["category"] == "Dress"
    assert body["item"]["image_url"] == "https://example.com/d.jpg"


def test_from_link_endpoint_handles_product_pages(client, monkeypatch):
    from tools.image_fetcher import ProductPageURLError

    def _raise(url):
        raise ProductPageURLError("page")

    monkeypatch.setattr("closet_app.app.fetch_image_as_base64", _raise)

    body = client.post("/items/from-link", json={"url": "https://item.jd.com/1.html", "language": "en"}).json()

    assert body["item"]["shop_link"] == "https://item.jd.com/1.html"
    assert body["notice"].startswith("Product page detected.")


def test_outfit_flow(client):
    created = client.post("/outfits", json={"name": "Office", "item_ids": ["1", "3", "99"]})
    outfit_id = created.json()["id"]

    summary = client.get(f"/outfits/{outfit_id}").json()
    assert [item["id"] for item in summary["items"]] == ["1", "3"]
    assert summary["total_value"] == 998.0
    assert summary["wear_count"] == 0

    assert len(client.post(f"/outfits/{outfit_id}/wear").json()["wear_dates"]) == 1
    assert client.delete(f"/outfits/{outfit_id}/wear").json()["wear_dates"] == []
    assert client.delete(f"/outfits/{outfit_id}/wear").json()["wear_dates"] == []

    renamed = client.put(f"/outfits/{outfit_id}", json={"name": "Office v2", "item_ids": ["1"]})
    assert renamed.json()["name"] == "Office v2"

    assert client.delete(f"/outfits/{outfit_id}").status_code == 204
    assert client.get(f"/outfits/{outfit_id}").status_code == 404
    assert client.post("/outfits", json={"name": "Empty", "item_ids": []}).status_code == 422


def test_recommendation_resolves_items(client):
    body = client.get("/recommendation", params={"language": "en"}).json()

    assert body["item_ids"] == ["1", "2", "99"]
    assert body["text"] == "Classic denim day"
    assert [item["id"] for item in body["items"]] == ["1", "2"]


def test_chat_endpoints(client, fake_client):
    fake_client.reply = "Go *minimal*"

    reply = client.post("/chat", json={"query": "Korean minimalist", "language": "en"})
    history = client.get("/chat").json()

    assert reply.json()["content"] == "Go minimal"
    assert [entry["role"] for entry in history] == ["ai", "user", "ai"]
    assert client.post("/chat", json={"query": ""}).status_code == 400
    assert len(client.delete("/chat", params={"language": "en"}).json()) == 1


def test_session_endpoints(client):
    assert client.get("/auth/me").status_code == 401
    assert client.patch("/auth/profile", json={"size": "M"}).status_code == 401
    assert client.post("/auth/login", json={"email_or_phone": "", "password": "pw"}).status_code == 401

    registered = client.post(
        "/auth/register", json={"name": "Mia", "email_or_phone": "mia@example.com", "password": "pw"}
    )
    assert registered.status_code == 201
    assert client.get("/auth/me").json()["name"] == "Mia"

    profile = client.patch("/auth/profile", json={"height": 168, "size": "M"}).json()
    assert profile["height"] == 168
    assert profile["name"] == "Mia"
    assert client.patch("/auth/profile", json={"height": -1}).status_code == 422

    assert client.post("/auth/logout").status_code == 204
    assert client.get("/auth/me").status_code == 401

    logged_in = client.post("/auth/login", json={"email_or_phone": "bo@example.com", "password": "pw"})
    assert logged_in.json()["name"] == "bo"


def test_inspiration_endpoints(client):
    saved = client.post("/inspirations", json={"content": "Trench plus loafers"}).json()
    client.post("/inspirations", json={"content": "Buy a scarf", "folder": "shopping"})

    assert saved["folder"] == "chat"
    assert len(client.get("/inspirations").json()) == 2
    assert [entry["content"] for entry in client.get("/inspirations", params={"folder": "shopping"}).json()] == [
        "Buy a scarf"
    ]
    assert client.delete(f"/inspirations/{saved['id']}").status_code == 204
    assert client.delete(f"/inspirations/{saved['id']}").status_code == 204
    assert len(client.get("/inspirations").json()) == 1


def test_stats_endpoint(client):
    stats = client.get("/stats").json()

    assert stats["item_count"] == 6
    assert stats["outfit_count"] == 1
    assert stats["categories"]["Outerwear"] == 2
