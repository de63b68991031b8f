"""
Country records for the Countries Explorer.

Turns the raw country dicts (bundled in countries_data.py or loaded from a
JSON file) into immutable CountryRecord objects, validating the dataset
invariants on the way. ISO-3166-1 alpha-2 codes are checked with the
pycountry library; unknown codes are allowed since the dataset also lists
dependencies and user-assigned codes.
"""

import json
import logging
from dataclasses import dataclass
from types import MappingProxyType

import pycountry

from countries_data import COUNTRIES_DATA

logger = logging.getLogger(__name__)

CONTINENTS = ("Africa", "Americas", "Asia", "Europe", "Oceania")

_REQUIRED_RECORD_FIELDS = {"code", "continent", "areaInKm2", "population", "capital", "name"}


@dataclass(frozen=True)
class CountryRecord:
    """
    One country or dependency, as loaded from the dataset.

    Attributes:
        code (str): ISO-3166-1 alpha-2 code, unique within the dataset.
        continent (str): One of CONTINENTS.
        area_in_km2 (int or float): Total area in square kilometres.
        population (int): Population estimate.
        capital (str): Capital city display name.
        name (Mapping[str, str]): Read-only mapping of language name to
            localized country name. Always contains "English".
    """

    code: str
    continent: str
    area_in_km2: float
    population: int
    capital: str
    name: MappingProxyType
# End of class CountryRecord


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_iso_country_code(code):
    """
    Return True if code is an assigned ISO-3166-1 alpha-2 country code.

    Args:
        code (str): Two-letter code such as "CA".

    Returns:
        bool: Whether pycountry knows the code.
    """
    return pycountry.countries.get(alpha_2=code) is not None
# End of function is_iso_country_code()


def build_country_record(raw):
    """
    Build a single CountryRecord from a raw country dict.

    Args:
        raw (dict): Dict with keys code, continent, areaInKm2, population,
            capital and name (a dict of language name -> country name).

    Returns:
        CountryRecord: The validated, immutable record.

    Raises:
        ValueError: If a field is missing or violates the dataset invariants.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a country object, got {type(raw).__name__}")

    missing_fields = _REQUIRED_RECORD_FIELDS - set(raw.keys())
    if missing_fields:
        raise ValueError(
            f"Country {raw.get('code', '?')!r} is missing fields: "
            f"{', '.join(sorted(missing_fields))}"
        )

    code = raw["code"]
    if not isinstance(code, str) or not code:
        raise ValueError(f"Country code must be a non-empty string, got {code!r}")

    if raw["continent"] not in CONTINENTS:
        raise ValueError(f"Country {code!r} has unknown continent {raw['continent']!r}")

    area = raw["areaInKm2"]
    if not _is_number(area) or area < 0:
        raise ValueError(f"Country {code!r} has invalid areaInKm2 {area!r}")

    population = raw["population"]
    if not isinstance(population, int) or isinstance(population, bool) or population < 0:
        raise ValueError(f"Country {code!r} has invalid population {population!r}")

    names = raw["name"]
    if not isinstance(names, dict) or not names.get("English"):
        raise ValueError(f"Country {code!r} must have an English name")

    if not is_iso_country_code(code):
        logger.warning("Country code '%s' is not an ISO-3166-1 alpha-2 code", code)

    return CountryRecord(
        code=code,
        continent=raw["continent"],
        area_in_km2=area,
        population=population,
        capital=raw["capital"],
        name=MappingProxyType(dict(names)),
    )
# End of function build_country_record()


def build_country_records(raw_countries):
    """
    Build the immutable, ordered dataset from a list of raw country dicts.

    Args:
        raw_countries (list[dict]): Raw country dicts in display order.

    Returns:
        tuple[CountryRecord]: The records, in the same order.

    Raises:
        ValueError: If any record is invalid or a code appears twice.
    """
    records = []
    seen_codes = set()

    for raw in raw_countries:
        record = build_country_record(raw)
        if record.code in seen_codes:
            raise ValueError(f"Duplicate country code {record.code!r}")
        seen_codes.add(record.code)
        records.append(record)
    # End of the loop that validates each raw country

    logger.info("Built dataset of %d countries", len(records))
    return tuple(records)
# End of function build_country_records()


def load_bundled_countries():
    """
    Return the dataset bundled with the application.

    Returns:
        tuple[CountryRecord]: Records built from countries_data.COUNTRIES_DATA.
    """
    return build_country_records(COUNTRIES_DATA)
# End of function load_bundled_countries()


def load_countries_json(path):
    """
    Load a dataset from a JSON file holding a list of country objects.

    The objects use the same shape as the bundled dataset.

    Args:
        path (str or os.PathLike): Path to the JSON file.

    Returns:
        tuple[CountryRecord]: The validated records, in file order.

    Raises:
        ValueError: If the file is not valid JSON, is not a list, or holds
            an invalid record.
        OSError: If the file cannot be read.
    """
    logger.info("Loading countries dataset from '%s'", path)
    with open(path, encoding="utf-8") as fh:
        try:
            raw_countries = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(raw_countries, list):
        raise ValueError(
            f"Expected a JSON array at the top level, got {type(raw_countries).__name__}"
        )

    return build_country_records(raw_countries)
# End of function load_countries_json()
