import pytest

from logic.wardrobe_stats import (
    category_distribution,
    cost_per_wear,
    item_cost_per_wear,
    outfit_total_value,
    total_wears,
)
from models.taxonomy import Category, Language
from tools.shopping_links import (
    ShoppingPlatform,
    item_keywords,
    item_search_urls,
    query_search_urls,
    search_url,
)


@pytest.mark.parametrize(
    "price, wears, expected",
    [(99, 12, 8.3), (299, 25, 12.0), (899, 0, 899.0), (None, 4, 0.0), (10, 3, 3.3), (1200, 8, 150.0)],
)
def test_cost_per_wear(price, wears, expected):
    assert cost_per_wear(price, wears) == expected


def test_item_cost_and_outfit_value(two_item_wardrobe):
    tee, jeans = two_item_wardrobe

    assert item_cost_per_wear(tee) == 8.3
    assert item_cost_per_wear(jeans) == 0.0
    assert outfit_total_value(two_item_wardrobe) == 99.0
    assert outfit_total_value([]) == 0.0
    assert total_wears(two_item_wardrobe) == 37


def test_category_distribution_omits_empty_categories(two_item_wardrobe):
    distribution = category_distribution(two_item_wardrobe + two_item_wardrobe[:1])

    assert distribution == {Category.TOP: 2, Category.BOTTOM: 1}
    assert list(distribution) == [Category.TOP, Category.BOTTOM]


def test_item_keywords_skip_missing_brand(two_item_wardrobe):
    tee = two_item_wardrobe[0]

    assert item_keywords(tee, Language.EN) == "white white tee Top"
    assert item_keywords(tee, Language.ZH) == "white white tee 上装"


def test_item_search_urls_cover_both_platforms(two_item_wardrobe):
    urls = item_search_urls(two_item_wardrobe[1], Language.EN)

    assert urls == {
        "taobao": "https://s.taobao.com/search?q=blue%20jeans%20Bottom",
        "jd": "https://search.jd.com/Search?keyword=blue%20jeans%20Bottom",
    }


def test_search_url_encodes_reserved_characters():
    assert search_url("a&b/c", ShoppingPlatform.JD) == "https://search.jd.com/Search?keyword=a%26b%2Fc"
    with pytest.raises(ValueError):
        search_url("x", "amazon")


@pytest.mark.parametrize("query", [None, "", "   "])
def test_query_search_urls_fall_back_to_generic_keyword(query):
    assert query_search_urls(query)["taobao"] == "https://s.taobao.com/search?q=Style%20Match"
