import pytest

from localization import SUPPORTED_LANGUAGES
from menu import (
    DEFAULT_MENU_KEY,
    MENU_ITEMS,
    SUBTITLE_PREFIX,
    custom_area_subtitle,
    custom_population_subtitle,
    get_menu_item,
    menu_groups,
    run_menu_item,
)


def test_menu_keys_are_unique():
    keys = [item.key for item in MENU_ITEMS]
    assert len(keys) == len(set(keys))


def test_menu_has_one_item_per_language():
    language_items = menu_groups()["Language"]
    assert [item.language for item in language_items] == list(SUPPORTED_LANGUAGES)
    assert get_menu_item("menu_arabic").label == "Arabic"


def test_default_menu_item_exists():
    assert get_menu_item(DEFAULT_MENU_KEY).language == "English"


def test_unknown_menu_item():
    with pytest.raises(KeyError):
        get_menu_item("menu_german")
    with pytest.raises(KeyError):
        run_menu_item(None, "menu_german")


def test_subtitles_share_prefix():
    for item in MENU_ITEMS:
        assert item.subtitle.startswith(f"{SUBTITLE_PREFIX} - ")


def test_run_language_item(small_catalog):
    subtitle, records, language = run_menu_item(small_catalog, "menu_korean")
    assert language == "Korean"
    assert len(records) == len(small_catalog)
    assert records[0]["name"] == "아프가니스탄"
    assert subtitle == "List of Countries and Dependencies - Names in Korean"


def test_run_population_1m_2m(small_catalog):
    subtitle, records, language = run_menu_item(small_catalog, "menu_population_1m_2m")
    assert subtitle == "List of Countries and Dependencies - Population between 1 and 2 million"
    assert [r["code"] for r in records] == ["EE", "LV", "SI"]
    assert language == "English"


def test_run_population_over_100m(small_catalog):
    _, records, _ = run_menu_item(small_catalog, "menu_population_100_000_000m")
    assert [r["code"] for r in records] == ["IN"]


def test_run_asia_all(small_catalog):
    subtitle, records, _ = run_menu_item(small_catalog, "menu_asia_all")
    assert subtitle.endswith("All countries in Asia")
    assert [r["code"] for r in records] == ["AF", "IN"]


def test_run_americas_over_1m_km2(small_catalog):
    _, records, _ = run_menu_item(small_catalog, "menu_americas_1mkm")
    assert [r["code"] for r in records] == ["CA", "BO"]


def test_custom_subtitles():
    assert custom_population_subtitle(1000000) == (
        "List of Countries and Dependencies - Population of at least 1,000,000"
    )
    assert custom_population_subtitle(1000, 5000).endswith("between 1,000 and 5,000")
    assert custom_area_subtitle("Europe", 50000).endswith("Europe, area of at least 50,000 km²")
