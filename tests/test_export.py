import csv
import io
import json

from data_model import TABLE_COLUMNS
from export import export_file_name, export_table_csv, export_table_json


def test_export_table_csv(small_catalog):
    records = small_catalog.countries_by_language("Korean")
    rows = list(csv.DictReader(io.StringIO(export_table_csv(records))))
    assert len(rows) == len(records)
    assert list(rows[0].keys()) == TABLE_COLUMNS
    assert rows[0]["name"] == "아프가니스탄"
    assert rows[0]["population"] == "35,530,081"


def test_export_table_csv_empty():
    content = export_table_csv([])
    assert content.strip() == ",".join(TABLE_COLUMNS)


def test_export_table_json(small_catalog):
    records = small_catalog.countries_by_area_and_continent("Asia", 0)
    payload = json.loads(
        export_table_json(records, subtitle="All countries in Asia", language="English")
    )
    assert payload["subtitle"] == "All countries in Asia"
    assert payload["language"] == "English"
    assert payload["count"] == 2
    assert [c["code"] for c in payload["countries"]] == ["AF", "IN"]
    assert list(payload["countries"][0].keys()) == TABLE_COLUMNS


def test_export_table_json_keeps_unicode(small_catalog):
    records = small_catalog.countries_by_language("Hindi")
    assert "भारत" in export_table_json(records)


def test_export_file_name():
    assert export_file_name("menu_asia_all", "csv") == "countries_menu_asia_all.csv"
    assert export_file_name("Custom Area/Europe", "json") == "countries_custom_area_europe.json"
