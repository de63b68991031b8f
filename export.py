"""
CSV and JSON export utilities for the Countries Explorer.

Converts the display records behind the current table into CSV or JSON
strings suitable for Streamlit download buttons.
"""

import json

from data_model import TABLE_COLUMNS, build_table_dataframe


def export_table_csv(records):
    """
    Exports display records to a CSV string (for Streamlit download).

    The index is not included in the output since it carries no meaningful
    information. Numbers are exported as displayed, i.e. formatted for the
    table's language.

    Args:
        records (list[dict]): Display records from a CountryCatalog query.

    Returns:
        str: CSV content with columns code, name, continent, areaInKm2,
            population, capital.
    """
    return build_table_dataframe(records).to_csv(index=False)
# End of function export_table_csv()


def export_table_json(records, subtitle=None, language=None):
    """
    Exports display records as a JSON string for download.

    Args:
        records (list[dict]): Display records from a CountryCatalog query.
        subtitle (str or None): Heading of the table, stored alongside the rows.
        language (str or None): Language the names are in.

    Returns:
        str: Pretty-printed JSON object with keys subtitle, language, count
            and countries.
    """
    payload = {
        "subtitle": subtitle,
        "language": language,
        "count": len(records),
        "countries": [
            {column: record.get(column) for column in TABLE_COLUMNS}
            for record in records
        ],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
# End of function export_table_json()


def _sanitise_filename(name):
    """
    Sanitise a string for use as a safe cross-platform file name component.

    Args:
        name (str): The raw string to sanitise.

    Returns:
        str: A file-system-safe, lower-case version of the name.
    """
    import re
    return re.sub(r'[/\\:*?"<>|, ]+', "_", name).strip("_").lower()
# End of function _sanitise_filename()


def export_file_name(menu_key, extension):
    """
    Return the download file name for a table, e.g. "countries_menu_asia_all.csv".

    Args:
        menu_key (str): Key of the menu item or custom filter shown.
        extension (str): File extension without the dot.

    Returns:
        str: The file name.
    """
    return f"countries_{_sanitise_filename(menu_key)}.{extension}"
# End of function export_file_name()
