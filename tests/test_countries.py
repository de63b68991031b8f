import json
import logging

import pytest

from countries import (
    CONTINENTS,
    CountryRecord,
    build_country_record,
    build_country_records,
    is_iso_country_code,
    load_bundled_countries,
    load_countries_json,
)
from countries_data import COUNTRIES_DATA


def test_build_country_record_maps_fields(raw_afghanistan):
    record = build_country_record(raw_afghanistan)
    assert isinstance(record, CountryRecord)
    assert record.code == "AF"
    assert record.continent == "Asia"
    assert record.area_in_km2 == 652230
    assert record.population == 35530081
    assert record.capital == "Kabul"
    assert record.name["Korean"] == "아프가니스탄"


def test_country_record_is_immutable(afghanistan):
    with pytest.raises(AttributeError):
        afghanistan.population = 0
    with pytest.raises(TypeError):
        afghanistan.name["English"] = "Changed"


def test_record_names_are_copied_from_raw(raw_afghanistan):
    record = build_country_record(raw_afghanistan)
    raw_afghanistan["name"]["English"] = "Changed"
    assert record.name["English"] == "Afghanistan"


@pytest.mark.parametrize("field", ["code", "continent", "areaInKm2", "population", "capital", "name"])
def test_missing_field_is_rejected(raw_afghanistan, field):
    del raw_afghanistan[field]
    with pytest.raises(ValueError, match=field):
        build_country_record(raw_afghanistan)


@pytest.mark.parametrize("field, value", [
    ("code", ""),
    ("code", None),
    ("continent", "Atlantis"),
    ("continent", "asia"),
    ("areaInKm2", -1),
    ("areaInKm2", "652230"),
    ("population", -5),
    ("population", 1.5),
    ("population", True),
    ("name", {"French": "Afghanistan"}),
    ("name", {"English": ""}),
])
def test_invalid_values_are_rejected(raw_afghanistan, field, value):
    raw_afghanistan[field] = value
    with pytest.raises(ValueError):
        build_country_record(raw_afghanistan)


def test_non_dict_record_is_rejected():
    with pytest.raises(ValueError, match="country object"):
        build_country_record(["AF"])


def test_duplicate_codes_are_rejected(raw_afghanistan, make_country):
    duplicate = make_country("AF", "Asia", 1, 1)
    with pytest.raises(ValueError, match="Duplicate country code 'AF'"):
        build_country_records([raw_afghanistan, duplicate])


def test_build_country_records_keeps_order(small_raw_dataset):
    records = build_country_records(small_raw_dataset)
    assert isinstance(records, tuple)
    assert [r.code for r in records] == [raw["code"] for raw in small_raw_dataset]


def test_zero_area_and_population_are_valid(make_country):
    record = build_country_record(make_country("AQ", "Oceania", 0, 0))
    assert record.area_in_km2 == 0
    assert record.population == 0


def test_is_iso_country_code():
    assert is_iso_country_code("CA")
    assert is_iso_country_code("AF")
    assert not is_iso_country_code("XK")


def test_unknown_iso_code_is_logged_not_rejected(make_country, caplog):
    with caplog.at_level(logging.WARNING, logger="countries"):
        record = build_country_record(make_country("XK", "Europe", 10908, 1883018))
    assert record.code == "XK"
    assert "XK" in caplog.text


def test_bundled_dataset_is_valid():
    records = load_bundled_countries()
    assert len(records) == len(COUNTRIES_DATA)
    assert len({r.code for r in records}) == len(records)
    for record in records:
        assert record.continent in CONTINENTS
        assert record.name["English"]
        assert record.population >= 0
        assert record.area_in_km2 >= 0


def test_load_countries_json(tmp_path, small_raw_dataset):
    path = tmp_path / "countries.json"
    path.write_text(json.dumps(small_raw_dataset, ensure_ascii=False), encoding="utf-8")

    records = load_countries_json(path)

    assert [r.code for r in records] == [raw["code"] for raw in small_raw_dataset]
    assert records[0].name["Korean"] == "아프가니스탄"


def test_load_countries_json_rejects_invalid_json(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_countries_json(path)


def test_load_countries_json_rejects_non_list(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text('{"code": "AF"}', encoding="utf-8")
    with pytest.raises(ValueError, match="JSON array"):
        load_countries_json(path)


def test_load_countries_json_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_countries_json(tmp_path / "missing.json")
