"""
Menu items of the Countries Explorer.

Each item names a fixed selection of the dataset: all countries with names
in one language, a population range, or a continent above an area
threshold. run_menu_item() dispatches an item to the CountryCatalog query
that produces its table.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from localization import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

SUBTITLE_PREFIX = "List of Countries and Dependencies"

LANGUAGE_GROUP = "Language"
POPULATION_GROUP = "Population"
AREA_GROUP = "Area and continent"


@dataclass(frozen=True)
class MenuItem:
    """
    A sidebar menu entry.

    Attributes:
        key (str): Stable identifier, e.g. "menu_population_1m_2m".
        label (str): Text shown in the menu.
        group (str): Menu section the item belongs to.
        subtitle (str): Heading shown above the table.
        language (str): Language the resulting names are in.
        query (Callable): Takes a CountryCatalog, returns display records.
    """

    key: str
    label: str
    group: str
    subtitle: str
    language: str
    query: Callable
# End of class MenuItem


def make_subtitle(detail):
    """Return the table heading for a selection, e.g. "... - All countries in Asia"."""
    return f"{SUBTITLE_PREFIX} - {detail}"


def _language_item(language):
    return MenuItem(
        key=f"menu_{language.lower()}",
        label=language,
        group=LANGUAGE_GROUP,
        subtitle=make_subtitle(f"Names in {language}"),
        language=language,
        query=lambda catalog: catalog.countries_by_language(language),
    )


MENU_ITEMS = [_language_item(language) for language in SUPPORTED_LANGUAGES] + [
    MenuItem(
        key="menu_population_1m_2m",
        label="Population 1 to 2 million",
        group=POPULATION_GROUP,
        subtitle=make_subtitle("Population between 1 and 2 million"),
        language="English",
        query=lambda catalog: catalog.countries_by_population(1000000, 2000000),
    ),
    MenuItem(
        key="menu_population_100_000_000m",
        label="Population over 100 million",
        group=POPULATION_GROUP,
        subtitle=make_subtitle("Population Greater than 100 Million"),
        language="English",
        query=lambda catalog: catalog.countries_by_population(100000000),
    ),
    MenuItem(
        key="menu_asia_all",
        label="All countries in Asia",
        group=AREA_GROUP,
        subtitle=make_subtitle("All countries in Asia"),
        language="English",
        query=lambda catalog: catalog.countries_by_area_and_continent("Asia", 0),
    ),
    MenuItem(
        key="menu_americas_1mkm",
        label="Americas, area over 1 million km²",
        group=AREA_GROUP,
        subtitle=make_subtitle("Area greater than 1 million Km2, Americas"),
        language="English",
        query=lambda catalog: catalog.countries_by_area_and_continent("Americas", 1000000),
    ),
]

DEFAULT_MENU_KEY = "menu_english"


def get_menu_item(key):
    """
    Look up a menu item by key.

    Raises:
        KeyError: If no item has this key.
    """
    for item in MENU_ITEMS:
        if item.key == key:
            return item
    raise KeyError(f"Unknown menu item: {key!r}")
# End of function get_menu_item()


def menu_groups():
    """
    Return the menu items grouped by section, in menu order.

    Returns:
        dict[str, list[MenuItem]]: Section name -> items.
    """
    groups = {}
    for item in MENU_ITEMS:
        groups.setdefault(item.group, []).append(item)
    return groups
# End of function menu_groups()


def run_menu_item(catalog, key):
    """
    Run the query behind a menu item.

    Args:
        catalog (CountryCatalog): The dataset to query.
        key (str): Menu item key.

    Returns:
        tuple: (subtitle, records, language) ready for the table view.

    Raises:
        KeyError: If no item has this key.
    """
    item = get_menu_item(key)
    records = item.query(catalog)
    logger.info("Menu item '%s' selected: %d countries", key, len(records))
    return item.subtitle, records, item.language
# End of function run_menu_item()


def custom_population_subtitle(min_population, max_population=None):
    """Heading for a population filter entered in the custom filter form."""
    if max_population is None:
        return make_subtitle(f"Population of at least {min_population:,}")
    return make_subtitle(f"Population between {min_population:,} and {max_population:,}")


def custom_area_subtitle(continent, min_area):
    """Heading for a continent and area filter entered in the custom filter form."""
    return make_subtitle(f"{continent}, area of at least {min_area:,} km²")
