import pytest

from models.catalog import initial_closet, initial_outfits
from models.clothing_item import ClothingItem
from models.outfit import SavedOutfit
from models.taxonomy import Category, Season
from tools.wardrobe_store import WardrobeStore


@pytest.fixture()
def store():
    return WardrobeStore(items=initial_closet(), outfits=initial_outfits())


def _new_item(item_id="new", **overrides):
    payload = dict(
        id=item_id,
        image_url="https://example.com/new.jpg",
        category=Category.DRESS,
        color="green",
        season=Season.SUMMER,
        description="Linen dress",
    )
    payload.update(overrides)
    return ClothingItem(**payload)


def test_add_item_prepends(store):
    store.add_item(_new_item())

    assert store.list_items()[0].id == "new"
    assert len(store.list_items()) == 7


def test_update_item_replaces_in_place(store):
    original_order = [item.id for item in store.list_items()]
    updated = _new_item("3", category=Category.OUTERWEAR, description="Shortened trench")

    store.update_item(updated)

    assert [item.id for item in store.list_items()] == original_order
    assert store.get_item("3").description == "Shortened trench"


def test_update_unknown_item_is_noop(store):
    before = store.list_items()

    store.update_item(_new_item("missing"))

    assert store.list_items() == before


def test_delete_item_removes_only_that_id(store):
    store.delete_item("2")
    store.delete_item("2")

    assert store.get_item("2") is None
    assert len(store.list_items()) == 5


def test_list_items_returns_a_copy(store):
    store.list_items().clear()

    assert len(store.list_items()) == 6


def test_filter_by_category_and_season(store):
    assert {item.id for item in store.filter_items(category="Outerwear")} == {"3", "5"}
    assert {item.id for item in store.filter_items(category=Category.OUTERWEAR, season="Winter")} == {"5"}
    assert len(store.filter_items(category="All", season="All")) == 6
    assert {item.id for item in store.filter_items(season=Season.ALL)} == {"1", "2", "4"}


def test_filter_can_hide_archived(store):
    store.update_item(_new_item("6", category=Category.TOP, is_archived=True))

    assert "6" not in {item.id for item in store.filter_items(include_archived=False)}
    assert "6" in {item.id for item in store.filter_items()}


def test_filter_rejects_unknown_category(store):
    with pytest.raises(ValueError):
        store.filter_items(category="Hat")


def test_resolve_items_keeps_order_and_drops_unknown(store):
    resolved = store.resolve_items(["4", "99", "1"])

    assert [item.id for item in resolved] == ["4", "1"]


def test_outfit_crud(store):
    outfit = SavedOutfit(id="o2", name="Date night", item_ids=["5", "2"])

    store.add_outfit(outfit)
    assert store.list_outfits()[0].id == "o2"

    store.update_outfit(SavedOutfit(id="o2", name="Date night", item_ids=["5", "2", "4"]))
    assert store.get_outfit("o2").item_ids == ["5", "2", "4"]

    store.update_outfit(SavedOutfit(id="ghost", name="Ghost", item_ids=["1"]))
    assert store.get_outfit("ghost") is None

    store.delete_outfit("o2")
    store.delete_outfit("o2")
    assert [outfit.id for outfit in store.list_outfits()] == ["outfit-1"]


def test_outfit_with_deleted_item_resolves_remaining(store):
    store.delete_item("2")
    outfit = store.get_outfit("outfit-1")

    assert [item.id for item in store.resolve_items(outfit.item_ids)] == ["1", "4"]
