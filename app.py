"""
Main Streamlit application for the Countries and Dependencies Explorer.

Entry point that ties together the backend modules (countries, data_model,
menu, view, export) into an interactive UI: a sidebar menu selects which
countries are listed and in which language, and the main panel renders them
as an HTML table.
"""

import logging
import os

import streamlit as st

from countries import CONTINENTS, load_bundled_countries, load_countries_json
from data_model import CountryCatalog, build_table_dataframe
from export import export_file_name, export_table_csv, export_table_json
from menu import (
    DEFAULT_MENU_KEY,
    custom_area_subtitle,
    custom_population_subtitle,
    menu_groups,
    run_menu_item,
)
from view import countries_to_table


# ---------------------------------------------------------------------------
# Page configuration
# ---------------------------------------------------------------------------

st.set_page_config(page_title="Countries and Dependencies", layout="wide")

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DATA_PATH_ENV = "COUNTRIES_DATA_PATH"
LOG_LEVEL_ENV = "COUNTRIES_LOG_LEVEL"

TABLE_CSS = """
<style>
table.countries-table { border-collapse: collapse; width: 100%; }
table.countries-table th, table.countries-table td {
    border-bottom: 1px solid #ddd; padding: 4px 8px; text-align: left;
}
</style>
"""

logging.basicConfig(
    level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


@st.cache_resource
def load_catalog(data_path):
    """
    Build the CountryCatalog once per process.

    Args:
        data_path (str or None): JSON dataset to load instead of the bundled
            one, or None for the bundled dataset.

    Returns:
        CountryCatalog: The catalog over the loaded dataset.

    Raises:
        ValueError: If the dataset is invalid.
        OSError: If the JSON file cannot be read.
    """
    if data_path:
        countries = load_countries_json(data_path)
    else:
        countries = load_bundled_countries()
    return CountryCatalog(countries)
# End of function load_catalog()


def select_menu_item(key):
    """
    Button callback storing the clicked menu item as the current selection.

    Args:
        key (str): Menu item key.
    """
    st.session_state["selection"] = {"kind": "menu", "key": key}
# End of function select_menu_item()


def run_selection(catalog, selection):
    """
    Run the query for the current selection.

    Args:
        catalog (CountryCatalog): The dataset to query.
        selection (dict): Either {"kind": "menu", "key": ...} or a custom
            filter {"kind": "population", "min": ..., "max": ...} /
            {"kind": "area", "continent": ..., "min_area": ...}.

    Returns:
        tuple: (selection_key, subtitle, records, language).
    """
    kind = selection["kind"]
    if kind == "population":
        records = catalog.countries_by_population(selection["min"], selection["max"])
        subtitle = custom_population_subtitle(selection["min"], selection["max"])
        return "custom_population", subtitle, records, "English"
    if kind == "area":
        records = catalog.countries_by_area_and_continent(
            selection["continent"], selection["min_area"]
        )
        subtitle = custom_area_subtitle(selection["continent"], selection["min_area"])
        return "custom_area", subtitle, records, "English"

    subtitle, records, language = run_menu_item(catalog, selection["key"])
    return selection["key"], subtitle, records, language
# End of function run_selection()


# ---------------------------------------------------------------------------
# Load the dataset
# ---------------------------------------------------------------------------

data_path = os.environ.get(DATA_PATH_ENV) or None

try:
    catalog = load_catalog(data_path)
except (ValueError, OSError) as exc:
    logger.error("Failed to load countries dataset: %s", exc)
    st.error(f"Error loading countries dataset: {exc}")
    st.stop()
# End of dataset loading

if "selection" not in st.session_state:
    st.session_state["selection"] = {"kind": "menu", "key": DEFAULT_MENU_KEY}


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------

st.title("Countries and Dependencies")


# ---------------------------------------------------------------------------
# Sidebar: menu
# ---------------------------------------------------------------------------

with st.sidebar:
    for group, items in menu_groups().items():
        st.subheader(group)
        for item in items:
            st.button(
                item.label,
                key=item.key,
                on_click=select_menu_item,
                args=(item.key,),
                use_container_width=True,
            )
        # End of the loop that renders the group's buttons
    # End of the loop over menu groups

    st.divider()

    # Custom filters built on the same queries as the menu
    with st.expander("Custom filter", expanded=False):
        with st.form("population_filter"):
            min_population = st.number_input("Minimum population", value=0, step=100000)
            use_max = st.checkbox("Limit maximum population", value=False)
            max_population = st.number_input("Maximum population", value=1000000, step=100000)
            if st.form_submit_button("Filter by population", use_container_width=True):
                st.session_state["selection"] = {
                    "kind": "population",
                    "min": int(min_population),
                    "max": int(max_population) if use_max else None,
                }
        # End of population filter form

        with st.form("area_filter"):
            continent = st.selectbox("Continent", options=catalog.continents() or list(CONTINENTS))
            min_area = st.number_input("Minimum area (km²)", value=0, step=10000)
            if st.form_submit_button("Filter by area", use_container_width=True):
                st.session_state["selection"] = {
                    "kind": "area",
                    "continent": continent,
                    "min_area": int(min_area),
                }
        # End of area filter form
    # End of custom filter expander

    st.caption(f"{len(catalog)} countries and dependencies loaded.")
# End of sidebar block


# ---------------------------------------------------------------------------
# Main panel: table
# ---------------------------------------------------------------------------

selection = st.session_state["selection"]
selection_key, subtitle, records, language = run_selection(catalog, selection)

st.subheader(subtitle)
st.caption(f"{len(records)} countries")

# Inverted ranges are not an error, they just match nothing
if selection["kind"] == "population" and selection["max"] is not None:
    if selection["min"] > selection["max"]:
        st.info("The minimum population is greater than the maximum, so no country can match.")

st.markdown(TABLE_CSS + countries_to_table(records, language), unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Data preview and downloads
# ---------------------------------------------------------------------------

with st.expander("Data preview", expanded=False):
    st.dataframe(build_table_dataframe(records), use_container_width=True, hide_index=True)
# End of data preview expander

dl_col1, dl_col2 = st.columns(2)

with dl_col1:
    st.download_button(
        label="Download CSV",
        data=export_table_csv(records),
        file_name=export_file_name(selection_key, "csv"),
        mime="text/csv",
        use_container_width=True,
    )
# End of dl_col1

with dl_col2:
    st.download_button(
        label="Download JSON",
        data=export_table_json(records, subtitle=subtitle, language=language),
        file_name=export_file_name(selection_key, "json"),
        mime="application/json",
        use_container_width=True,
    )
# End of dl_col2
