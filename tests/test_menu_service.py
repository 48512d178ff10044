"""
Menu Assembly Tests

Verifies:
- categories come back in display order, items grouped under their category
- categories without items are kept, hidden categories and items are not
- unknown or inactive slugs raise NotFoundError
- search filtering and the static demo menu
- the backend and local storage produce the same menu shape
"""

import pytest

from app.exceptions import NotFoundError
from domain.demo_menu import ALL_CATEGORIES, DEMO_MENU_ITEMS
from services.menu_service import MenuService
from test_fixtures import (
    make_category,
    make_item,
    make_restaurant,
    make_spice_garden,
)


def test_spice_garden_menu(demo_selector, local_store):
    make_spice_garden(local_store)

    menu = MenuService.get_menu_for_slug(demo_selector, "spice-garden")

    assert menu["name"] == "Spice Garden"
    assert [c["name"] for c in menu["categories"]] == ["Main Course", "Desserts"]
    main_course, desserts = menu["categories"]
    assert [i["name"] for i in main_course["items"]] == ["Fish Curry"]
    assert main_course["items"][0]["price"] == 350
    assert desserts["items"] == []


def test_categories_sorted_by_display_order(demo_selector, local_store):
    restaurant = make_restaurant(local_store)
    make_category(local_store, restaurant, "B", display_order=2)
    make_category(local_store, restaurant, "A", display_order=1)

    menu = MenuService.get_menu_for_slug(demo_selector, "spice-garden")

    assert [c["name"] for c in menu["categories"]] == ["A", "B"]


def test_equal_display_order_keeps_creation_order(local_store):
    restaurant = make_restaurant(local_store)
    for name in ("Soups", "Salads", "Sides"):
        make_category(local_store, restaurant, name, display_order=0)

    menu = MenuService.build_menu(local_store, "spice-garden")

    assert [c["name"] for c in menu["categories"]] == ["Soups", "Salads", "Sides"]


def test_hidden_categories_and_unavailable_items_excluded(local_store):
    restaurant = make_restaurant(local_store)
    shown = make_category(local_store, restaurant, "Mains", 0)
    make_category(local_store, restaurant, "Seasonal", 1, is_active=False)
    make_item(local_store, shown, "Fish Curry", 350)
    make_item(local_store, shown, "Crab Roast", 600, display_order=1, is_available=False)

    menu = MenuService.build_menu(local_store, "spice-garden")

    assert [c["name"] for c in menu["categories"]] == ["Mains"]
    assert [i["name"] for i in menu["categories"][0]["items"]] == ["Fish Curry"]


def test_items_of_other_restaurants_not_included(local_store):
    data = make_spice_garden(local_store)
    other = make_restaurant(local_store, "Other Place", "other-place")
    other_category = make_category(local_store, other, "Main Course")
    make_item(local_store, other_category, "Pizza", 400)

    menu = MenuService.build_menu(local_store, "spice-garden")

    names = [i["name"] for c in menu["categories"] for i in c["items"]]
    assert names == ["Fish Curry"]
    assert menu["id"] == data["restaurant"]["id"]


def test_unknown_slug_raises_not_found(demo_selector):
    with pytest.raises(NotFoundError) as exc_info:
        MenuService.get_menu_for_slug(demo_selector, "nowhere")

    assert str(exc_info.value) == "Restaurant not found"


def test_inactive_restaurant_is_not_found(demo_selector, local_store):
    make_restaurant(local_store, is_active=False)

    with pytest.raises(NotFoundError):
        MenuService.get_menu_for_slug(demo_selector, "spice-garden")


def test_backend_and_local_menus_have_same_shape(backend_selector, local_store):
    make_spice_garden(local_store)
    backend_selector.run(make_spice_garden)

    local_menu = MenuService.build_menu(local_store, "spice-garden")
    backend_menu = MenuService.get_menu_for_slug(backend_selector, "spice-garden")

    def shape(menu):
        return [
            (c["name"], [(i["name"], float(i["price"])) for i in c["items"]])
            for c in menu["categories"]
        ]

    assert shape(backend_menu) == shape(local_menu)
    assert set(backend_menu["categories"][0]) >= {"id", "name", "display_order", "items"}


# =============================================================================
# SEARCH
# =============================================================================


def test_filter_menu_matches_name_or_description(local_store):
    restaurant = make_restaurant(local_store)
    mains = make_category(local_store, restaurant, "Mains", 0)
    desserts = make_category(local_store, restaurant, "Desserts", 1)
    make_item(local_store, mains, "Fish Curry", 350, description="Coconut gravy")
    make_item(local_store, mains, "Chicken Fry", 300, display_order=1)
    make_item(local_store, desserts, "Payasam", 100, description="Coconut milk pudding")

    menu = MenuService.build_menu(local_store, "spice-garden")
    filtered = MenuService.filter_menu(menu, "COCONUT")

    assert [
        (c["name"], [i["name"] for i in c["items"]]) for c in filtered["categories"]
    ] == [("Mains", ["Fish Curry"]), ("Desserts", ["Payasam"])]


def test_filter_menu_drops_emptied_categories(local_store):
    make_spice_garden(local_store)
    menu = MenuService.build_menu(local_store, "spice-garden")

    filtered = MenuService.filter_menu(menu, "fish")

    assert [c["name"] for c in filtered["categories"]] == ["Main Course"]


def test_blank_search_returns_menu_unchanged(local_store):
    make_spice_garden(local_store)
    menu = MenuService.build_menu(local_store, "spice-garden")

    assert MenuService.filter_menu(menu, "   ") is menu
    assert MenuService.filter_menu(menu, None) is menu


# =============================================================================
# DEMO MENU
# =============================================================================


def test_demo_menu_lists_all_categories():
    menu = MenuService.get_demo_menu()

    assert menu["categories"][0] == ALL_CATEGORIES
    assert menu["categories"][1:] == ["Breakfast", "Lunch", "Dinner", "Beverages", "Desserts"]
    assert sum(len(g["items"]) for g in menu["groups"]) == len(DEMO_MENU_ITEMS)


def test_demo_menu_category_and_search_filters():
    menu = MenuService.get_demo_menu(search="curry", category="Lunch")

    assert menu["selected_category"] == "Lunch"
    assert [(g["category"], [i["name"] for i in g["items"]]) for g in menu["groups"]] == [
        ("Lunch", ["Beef Curry"])
    ]


def test_demo_menu_search_without_matches_has_no_groups():
    assert MenuService.get_demo_menu(search="sushi")["groups"] == []


def test_seeded_sample_restaurant(demo_selector, local_store):
    from scripts.seed_demo import seed

    seed(local_store, "demo-user")
    seed(local_store, "demo-user")

    menu = MenuService.get_menu_for_slug(demo_selector, "spice-garden")
    assert [c["name"] for c in menu["categories"]] == ["Starters", "Main Course", "Desserts"]
    assert menu["categories"][1]["items"][0]["name"] == "Fish Curry"
    assert menu["categories"][1]["items"][0]["price"] == 350
