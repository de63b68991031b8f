import pytest

from localization import (
    LANGUAGE_CODES,
    SUPPORTED_LANGUAGES,
    format_number_for_language,
    lang_code_for_language,
)


def _plain_spaces(text):
    return "".join(" " if ch.isspace() else ch for ch in text)


@pytest.mark.parametrize("language, code", [
    ("English", "en"),
    ("Arabic", "ar"),
    ("Chinese", "zh"),
    ("French", "fr"),
    ("Hindi", "hi"),
    ("Japanese", "ja"),
    ("Korean", "ko"),
    ("Russian", "ru"),
])
def test_lang_code_for_supported_languages(language, code):
    assert lang_code_for_language(language) == code


@pytest.mark.parametrize("language", ["German", "korean", "ENGLISH", "", " English", "Klingon", None, 42])
def test_lang_code_for_unknown_language_is_none(language):
    assert lang_code_for_language(language) is None


def test_supported_languages_match_codes():
    assert SUPPORTED_LANGUAGES == tuple(LANGUAGE_CODES)
    assert len(SUPPORTED_LANGUAGES) == 8


@pytest.mark.parametrize("language, expected", [
    ("English", "652,230"),
    ("Korean", "652,230"),
    ("Japanese", "652,230"),
    ("Chinese", "652,230"),
    ("Hindi", "6,52,230"),
])
def test_format_number_comma_locales(language, expected):
    assert format_number_for_language(652230, language) == expected


def test_format_number_hindi_uses_indian_grouping():
    assert format_number_for_language(35530081, "Hindi") == "3,55,30,081"
    assert format_number_for_language(1339180127, "Hindi") == "1,33,91,80,127"


def test_format_number_russian_groups_with_spaces():
    result = format_number_for_language(652230, "Russian")
    assert "," not in result
    assert _plain_spaces(result) == "652 230"


def test_format_number_french_groups_with_spaces():
    assert _plain_spaces(format_number_for_language(35530081, "French")) == "35 530 081"


def test_format_number_arabic_uses_latin_digits():
    result = format_number_for_language(652230, "Arabic")
    assert result.startswith("652")
    assert result.endswith("230")


def test_format_number_unknown_language_uses_default_grouping():
    assert format_number_for_language(35530081, "Klingon") == "35,530,081"
    assert format_number_for_language(35530081, "") == "35,530,081"


def test_format_number_small_values_and_fractions():
    assert format_number_for_language(0, "English") == "0"
    assert format_number_for_language(765, "Hindi") == "765"
    assert format_number_for_language(0.44, "English") == "0.44"


@pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
def test_format_number_is_deterministic(language):
    first = format_number_for_language(1409517397, language)
    second = format_number_for_language(1409517397, language)
    assert first == second
    assert isinstance(first, str)
