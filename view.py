"""
HTML rendering of display records for the Countries Explorer.

Builds the countries table shown in the main panel: one row per display
record with a flag image, the country code, the localized name (tagged with
a lang attribute), continent, area, population and capital.
"""

import html

from localization import lang_code_for_language

FLAG_SIZES = (16, 24, 32, 48, 64)

FLAG_URL_TEMPLATE = "https://flagsapi.com/{code}/flat/{size}.png"

DEFAULT_FLAG_SIZE = 32

TABLE_HEADERS = ["Flag", "Code", "Country", "Continent", "Area (km²)", "Population", "Capital"]

EMPTY_TABLE_MESSAGE = "No countries match this selection."


class InvalidFlagSizeError(ValueError):
    """Raised when a flag image is requested in a size the service does not offer."""

    def __init__(self, size):
        super().__init__(
            f"Invalid flag size {size!r}, expected one of {', '.join(map(str, FLAG_SIZES))}"
        )
        self.size = size
# End of class InvalidFlagSizeError


def lang_attribute(language):
    """
    Return the value for a lang attribute, "" for an unknown language.

    Args:
        language (str): The language name, e.g. "French".

    Returns:
        str: The 2-letter code, or the empty string.
    """
    code = lang_code_for_language(language)
    return "" if code is None else code
# End of function lang_attribute()


def country_code_to_flag_url(country_code, size=DEFAULT_FLAG_SIZE):
    """
    Return the URL of a country's flag image.

    Args:
        country_code (str): ISO-3166-1 alpha-2 code, e.g. "CA".
        size (int or str): Flag size in pixels, one of FLAG_SIZES. Digit
            strings such as "24" are accepted.

    Returns:
        str: e.g. "https://flagsapi.com/CA/flat/24.png".

    Raises:
        InvalidFlagSizeError: If size is not one of FLAG_SIZES.
    """
    if isinstance(size, str) and size.isdigit():
        pixels = int(size)
    elif isinstance(size, int) and not isinstance(size, bool):
        pixels = size
    else:
        raise InvalidFlagSizeError(size)

    if pixels not in FLAG_SIZES:
        raise InvalidFlagSizeError(size)

    return FLAG_URL_TEMPLATE.format(code=country_code, size=pixels)
# End of function country_code_to_flag_url()


def country_code_to_img(country_code, size=DEFAULT_FLAG_SIZE):
    """
    Return an <img> element for a country's flag.

    Args:
        country_code (str): ISO-3166-1 alpha-2 code.
        size (int or str): One of FLAG_SIZES.

    Returns:
        str: The HTML img element.
    """
    url = country_code_to_flag_url(country_code, size)
    return (
        f'<img src="{html.escape(url)}" alt="{html.escape(country_code)}" '
        f'width="{int(size)}" height="{int(size)}">'
    )
# End of function country_code_to_img()


def _cell(value, lang=None):
    text = "" if value is None else html.escape(str(value))
    if lang is None:
        return f"<td>{text}</td>"
    return f'<td lang="{html.escape(lang)}">{text}</td>'


def country_to_row(record, language):
    """
    Render one display record as a <tr> table row.

    Args:
        record (dict): Display record from a CountryCatalog query.
        language (str): Language the record's name is in, used for the
            lang attribute of the name cell.

    Returns:
        str: The HTML row.
    """
    cells = [
        f"<td>{country_code_to_img(record['code'])}</td>",
        _cell(record["code"]),
        _cell(record["name"], lang=lang_attribute(language)),
        _cell(record["continent"]),
        _cell(record["areaInKm2"]),
        _cell(record["population"]),
        _cell(record["capital"]),
    ]
    return "<tr>" + "".join(cells) + "</tr>"
# End of function country_to_row()


def countries_to_table(records, language):
    """
    Render display records as a complete HTML table.

    The table is rebuilt from scratch on every call. An empty list renders
    the header and a single row with EMPTY_TABLE_MESSAGE.

    Args:
        records (list[dict]): Display records from a CountryCatalog query.
        language (str): Language the names are in.

    Returns:
        str: The HTML table.
    """
    header = "".join(f"<th>{html.escape(h)}</th>" for h in TABLE_HEADERS)

    if records:
        body = "\n".join(country_to_row(record, language) for record in records)
    else:
        body = (
            f'<tr><td colspan="{len(TABLE_HEADERS)}">'
            f"{html.escape(EMPTY_TABLE_MESSAGE)}</td></tr>"
        )

    return (
        '<table class="countries-table">\n'
        f"<thead><tr>{header}</tr></thead>\n"
        f'<tbody id="table-rows">\n{body}\n</tbody>\n'
        "</table>"
    )
# End of function countries_to_table()
