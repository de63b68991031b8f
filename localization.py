"""
Localization helpers for the Countries Explorer.

Maps the human-readable language names used by the menu and the dataset to
2-letter language codes, and formats numbers with the digit grouping and
separators of each language's locale using Babel's CLDR data.
"""

import logging

from babel.numbers import format_decimal

logger = logging.getLogger(__name__)

# Language name -> ISO 639-1 code, in menu order
LANGUAGE_CODES = {
    "English": "en",
    "Arabic": "ar",
    "Chinese": "zh",
    "French": "fr",
    "Hindi": "hi",
    "Japanese": "ja",
    "Korean": "ko",
    "Russian": "ru",
}

SUPPORTED_LANGUAGES = tuple(LANGUAGE_CODES)

# Locale used when a language name is not recognised
DEFAULT_NUMBER_LOCALE = "en"


def lang_code_for_language(language):
    """
    Return the 2-letter language code for a language name.

    The lookup is exact and case-sensitive: "Korean" resolves to "ko" but
    "korean", "" or "German" are unknown.

    Args:
        language (str): The full language name, e.g. "Korean".

    Returns:
        str or None: The 2-letter code, or None for an unknown language.

    Example:
        >>> lang_code_for_language("Korean")
        'ko'
        >>> lang_code_for_language("German") is None
        True
    """
    if not isinstance(language, str):
        return None
    return LANGUAGE_CODES.get(language)
# End of function lang_code_for_language()


def format_number_for_language(number, language):
    """
    Format a number for display using the conventions of a language.

    The language name is resolved with lang_code_for_language() and the
    number is formatted with that locale's grouping rules, e.g. Hindi groups
    by two after the first three digits (35530081 -> "3,55,30,081") and
    Russian separates groups with a no-break space. Unknown languages use
    the DEFAULT_NUMBER_LOCALE grouping. Digits are always Latin.

    Args:
        number (int or float): The value to format.
        language (str): The language name, e.g. "Hindi".

    Returns:
        str: The formatted number.
    """
    locale = lang_code_for_language(language)
    if locale is None:
        logger.debug(
            "No locale for language=%r, formatting %s with default locale '%s'",
            language,
            number,
            DEFAULT_NUMBER_LOCALE,
        )
        locale = DEFAULT_NUMBER_LOCALE

    return format_decimal(number, locale=locale)
# End of function format_number_for_language()
