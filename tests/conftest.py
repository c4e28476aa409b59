"""Pytest configuration and fixtures for langsync tests."""

from pathlib import Path
from typing import Any, Dict

import pytest

from langsync.language_dictionary import LanguageDictionary

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "langsync"

GOOGLE_PAGE_URL = "https://translate.google.com/"
GOOGLE_NATIVE_NAMES_URL = "https://ssl.gstatic.com/inputtools/js/ln/17/en.js"
YANDEX_PAGE_URL = "https://translate.yandex.com/"
MICROSOFT_LANGUAGES_URL = "https://api.cognitive.microsofttranslator.com/languages"


def load_fixture(name: str) -> bytes:
    """Load a raw fixture file."""
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture
def google_page() -> bytes:
    return load_fixture("google_translate.html")


@pytest.fixture
def google_native_names() -> bytes:
    return load_fixture("google_en.js")


@pytest.fixture
def yandex_page() -> bytes:
    return load_fixture("yandex_translate.html")


@pytest.fixture
def microsoft_languages() -> bytes:
    return load_fixture("microsoft_languages.json")


@pytest.fixture
def small_dictionary_content() -> Dict[str, Any]:
    """A handful of canonical languages with mixed service support."""
    return {
        "languages": [
            {
                "iso6391": "en",
                "iso6393": "eng",
                "name": "English",
                "nativeName": "English",
                "services": ["google", "bing", "yandex", "microsoft"],
            },
            {
                "iso6391": "fr",
                "iso6393": "fra",
                "name": "French",
                "nativeName": "Français",
                "services": ["google", "bing", "yandex", "microsoft"],
            },
            {
                "iso6391": "he",
                "iso6393": "heb",
                "name": "Hebrew",
                "nativeName": "עברית",
                "services": ["google", "bing", "yandex", "microsoft"],
            },
            {
                "iso6391": "yue",
                "iso6393": "yue",
                "name": "Cantonese",
                "nativeName": "粵語",
                "services": ["google", "bing", "microsoft"],
            },
            {
                "iso6391": "zh-CN",
                "iso6393": "zho-CN",
                "name": "Chinese (Simplified)",
                "nativeName": "中文 (简体)",
                "services": ["google", "bing", "yandex", "microsoft"],
            },
        ],
        "aliases": {"iw": "he", "zh": "zh-CN"},
    }


@pytest.fixture
def small_dictionary(small_dictionary_content: Dict[str, Any]) -> LanguageDictionary:
    return LanguageDictionary.from_json(small_dictionary_content)

