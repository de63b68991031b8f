import pytest

from countries import build_country_records
from data_model import CountryCatalog


AFGHANISTAN = {
    "code": "AF",
    "continent": "Asia",
    "areaInKm2": 652230,
    "population": 35530081,
    "capital": "Kabul",
    "name": {
        "English": "Afghanistan",
        "Arabic": "أفغانستان",
        "Chinese": "阿富汗",
        "French": "Afghanistan",
        "Hindi": "अफ़ग़ानिस्तान",
        "Korean": "아프가니스탄",
        "Japanese": "アフガニスタン",
        "Russian": "Афганистан",
    },
}


def make_raw_country(code, continent, area, population, names=None, capital="Capital"):
    return {
        "code": code,
        "continent": continent,
        "areaInKm2": area,
        "population": population,
        "capital": capital,
        "name": names or {"English": f"Country {code}"},
    }


@pytest.fixture
def raw_afghanistan():
    return dict(AFGHANISTAN, name=dict(AFGHANISTAN["name"]))


@pytest.fixture
def afghanistan(raw_afghanistan):
    return build_country_records([raw_afghanistan])[0]


@pytest.fixture
def small_raw_dataset(raw_afghanistan):
    return [
        raw_afghanistan,
        make_raw_country("CA", "Americas", 9984670, 36624199,
                         {"English": "Canada", "French": "Canada", "Korean": "캐나다"}),
        make_raw_country("EE", "Europe", 45227, 1309632,
                         {"English": "Estonia", "French": "Estonie"}),
        make_raw_country("JM", "Americas", 10991, 2890299, {"English": "Jamaica"}),
        make_raw_country("IN", "Asia", 3287263, 1339180127,
                         {"English": "India", "Hindi": "भारत"}),
        make_raw_country("AU", "Oceania", 7692024, 24450561, {"English": "Australia"}),
        make_raw_country("LV", "Europe", 64559, 1000000, {"English": "Latvia"}),
        make_raw_country("SI", "Europe", 20273, 2000000, {"English": "Slovenia"}),
        make_raw_country("BO", "Americas", 1000000, 11051600, {"English": "Bolivia"}),
    ]


@pytest.fixture
def small_catalog(small_raw_dataset):
    return CountryCatalog(build_country_records(small_raw_dataset))


@pytest.fixture
def make_country():
    return make_raw_country
