"""
data_model.py - Projection and querying of the countries dataset.

Projects immutable CountryRecord objects into display records (plain dicts
with the name switched to one language and the numbers formatted for it),
answers the menu queries over an injected dataset, and builds the pandas
DataFrame used for previews and exports.
"""

import logging

import pandas as pd

from localization import SUPPORTED_LANGUAGES, format_number_for_language

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "English"

TABLE_COLUMNS = ["code", "name", "continent", "areaInKm2", "population", "capital"]


class UnrecognizedLanguageError(ValueError):
    """Raised when a country is projected into a language it cannot support."""

    def __init__(self, language):
        super().__init__(f"Unrecognized language name: {language!r}")
        self.language = language
# End of class UnrecognizedLanguageError


def country_for_language(country, language):
    """
    Return a display record for a country in the given language.

    The record is a new dict; the country itself is never modified. For
    example, projecting Afghanistan into "Korean" gives:

        {
            "code": "AF",
            "continent": "Asia",
            "areaInKm2": "652,230",
            "population": "35,530,081",
            "capital": "Kabul",
            "name": "아프가니스탄",
        }

    Args:
        country (CountryRecord): The country to project.
        language (str): One of SUPPORTED_LANGUAGES, or a language the
            country has a name for.

    Returns:
        dict: Display record with keys code, continent, areaInKm2,
            population, capital and name. The name is None when a supported
            language has no translation for this country.

    Raises:
        UnrecognizedLanguageError: If the language is neither supported nor
            present in the country's names.
    """
    if language not in SUPPORTED_LANGUAGES and language not in country.name:
        raise UnrecognizedLanguageError(language)

    return {
        "code": country.code,
        "continent": country.continent,
        "areaInKm2": format_number_for_language(country.area_in_km2, language),
        "population": format_number_for_language(country.population, language),
        "capital": country.capital,
        "name": country.name.get(language),
    }
# End of function country_for_language()


class CountryCatalog:
    """
    Read-only collection of countries answering the menu queries.

    Every query walks the dataset in its original order and returns freshly
    projected display records; nothing is sorted or cached.

    Attributes:
        countries (tuple[CountryRecord]): The dataset, in display order.
    """

    def __init__(self, countries):
        """
        Initialise the catalog.

        Args:
            countries (Iterable[CountryRecord]): The dataset to query.
        """
        self.countries = tuple(countries)
    # End of __init__

    def __len__(self):
        return len(self.countries)

    def __iter__(self):
        return iter(self.countries)

    def continents(self):
        """
        Return the distinct continents of the dataset, in dataset order.

        Returns:
            list[str]: Continent names, each listed once.
        """
        seen = []
        for country in self.countries:
            if country.continent not in seen:
                seen.append(country.continent)
        return seen
    # End of continents

    def countries_by_language(self, language):
        """
        Return every country with its name in the given language.

        Countries without a translation for the language are projected in
        English instead, so an unsupported language gives the English list.

        Args:
            language (str): The language name, e.g. "French".

        Returns:
            list[dict]: One display record per country.
        """
        results = []
        for country in self.countries:
            if country.name.get(language) is None:
                results.append(country_for_language(country, FALLBACK_LANGUAGE))
            else:
                results.append(country_for_language(country, language))
        # End of the loop that projects each country

        logger.debug("countries_by_language(%r) -> %d countries", language, len(results))
        return results
    # End of countries_by_language

    def countries_by_population(self, min_population, max_population=None):
        """
        Return the countries whose population lies within a range.

        Both bounds are inclusive. Without max_population the range is open
        ended. A range where min_population > max_population matches nothing
        and yields an empty list.

        Args:
            min_population (int): Lower bound (required).
            max_population (int or None): Upper bound, or None for no limit.

        Returns:
            list[dict]: English display records, in dataset order.
        """
        if max_population is not None and min_population > max_population:
            logger.debug(
                "Inverted population range %s > %s matches no countries",
                min_population,
                max_population,
            )

        results = []
        for country in self.countries:
            if country.population < min_population:
                continue
            if max_population is not None and country.population > max_population:
                continue
            results.append(country_for_language(country, FALLBACK_LANGUAGE))
        # End of the loop that filters by population

        logger.debug(
            "countries_by_population(%s, %s) -> %d countries",
            min_population,
            max_population,
            len(results),
        )
        return results
    # End of countries_by_population

    def countries_by_area_and_continent(self, continent, min_area):
        """
        Return the countries of a continent with at least the given area.

        The continent must match exactly (case-sensitive). An unknown
        continent simply matches nothing.

        Args:
            continent (str): Continent name, e.g. "Americas".
            min_area (int or float): Minimum area in km², inclusive.

        Returns:
            list[dict]: English display records, in dataset order.
        """
        results = [
            country_for_language(country, FALLBACK_LANGUAGE)
            for country in self.countries
            if country.continent == continent and country.area_in_km2 >= min_area
        ]

        logger.debug(
            "countries_by_area_and_continent(%r, %s) -> %d countries",
            continent,
            min_area,
            len(results),
        )
        return results
    # End of countries_by_area_and_continent
# End of class CountryCatalog


def build_table_dataframe(records):
    """
    Builds a DataFrame from display records.

    Args:
        records (list[dict]): Display records from a CountryCatalog query.

    Returns:
        pd.DataFrame: One row per record with columns code, name, continent,
            areaInKm2, population, capital. Empty input gives an empty
            DataFrame with the same columns.
    """
    if not records:
        return pd.DataFrame(columns=TABLE_COLUMNS)

    table_df = pd.DataFrame(records)
    return table_df[TABLE_COLUMNS]
# End of function build_table_dataframe()
