"""
Google Translate language scraper
"""

import logging
from typing import Any, Dict, List, Optional, Set

from ..classes import LanguageInventory, ScrapedLanguage
from ..constants import GOOGLE_NATIVE_NAMES_URL, GOOGLE_PAGE_URL, UNKNOWN
from ..consts.services import TranslationService
from ..consts.tts_languages import (
    GOOGLE2_TTS_LANGUAGE_CODES,
    GOOGLE_TTS_LANGUAGE_CODES,
)
from ..errors import ExtractionError
from ..extraction import (
    find_marker,
    normalize_quasi_json,
    parse_json,
    read_digit_before,
    slice_between,
)
from ..langsync_config import LangsyncConfig
from ..language_dictionary import LanguageDictionary
from .abstract import AbstractLanguageProvider, AlternateTtsImplementation

LOGGER = logging.getLogger(__name__)


class GoogleLanguageProvider(AbstractLanguageProvider):
    """
    Scrapes the translate.google.com page.

    The page loads several data blocks through AF_initDataCallback, each
    keyed 'ds:<digit>'. The digit of a block is found next to that block's
    RPC id elsewhere in the page, a fixed number of bytes before it.
    """

    LANGUAGES_ID: bytes = b"n9wk7"
    TTS_LANGUAGES_ID: bytes = b"ycyxUb"
    KEY_DIGIT_DISTANCE: int = 10
    CALLBACK_PREFIX: str = "AF_initDataCallback({key: 'ds:%d'"
    DATA_START: bytes = b"data:"
    DATA_END: bytes = b", sideChannel"
    NATIVE_NAMES_START: bytes = b"window.LanguageDisplays.nativeNames = "
    NATIVE_NAMES_END: bytes = b";window.LanguageDisplays.localNames"
    ALTERNATE_IMPLEMENTATION: str = "GoogleTranslator2"

    page_url: str
    native_names_url: str

    def __init__(self, language_dictionary: Optional[LanguageDictionary] = None):
        super().__init__(language_dictionary=language_dictionary)
        self.page_url = LangsyncConfig().get("Google", "page_url", GOOGLE_PAGE_URL)
        self.native_names_url = LangsyncConfig().get(
            "Google", "native_names_url", GOOGLE_NATIVE_NAMES_URL
        )

    def _build_http_header(self) -> Dict[str, str]:
        return {}

    def service_id(self) -> TranslationService:
        return TranslationService.GOOGLE

    def known_tts_languages(self) -> Set[ScrapedLanguage]:
        return self.resolve_languages(GOOGLE_TTS_LANGUAGE_CODES)

    def alternate_tts_implementation(self) -> Optional[AlternateTtsImplementation]:
        return AlternateTtsImplementation(
            self.ALTERNATE_IMPLEMENTATION,
            frozenset(self.resolve_languages(GOOGLE2_TTS_LANGUAGE_CODES)),
        )

    def fetch_inventory(self) -> LanguageInventory:
        page = self.download(self.page_url)

        languages = self.__parse_languages(page)
        tts_languages = self.__parse_tts_languages(page)

        LOGGER.info(
            f"Google: {len(languages)} languages, {len(tts_languages)} TTS languages"
        )
        return LanguageInventory.build(languages, tts_languages)

    def get_callback_data(self, page: bytes, block_id: bytes) -> Any:
        """
        Get the JSON payload of the data callback that owns a block
        :param page: Translate page
        :param block_id: RPC id identifying the block
        :return: Parsed payload
        """
        key = read_digit_before(page, block_id, self.KEY_DIGIT_DISTANCE)
        callback_start = (self.CALLBACK_PREFIX % key).encode("ascii")
        callback_offset = find_marker(page, callback_start)

        LOGGER.debug(f"Block {block_id!r} is loaded by ds:{key} at {callback_offset}")
        return parse_json(
            slice_between(page, self.DATA_START, self.DATA_END, callback_offset),
            f"Google ds:{key} callback data",
        )

    def get_native_names(self) -> Dict[str, str]:
        """
        Download the input tools locale script and pull its
        code => native name table out of it
        :return: Native names by code
        """
        script = normalize_quasi_json(self.download(self.native_names_url))
        native_names = parse_json(
            slice_between(script, self.NATIVE_NAMES_START, self.NATIVE_NAMES_END),
            "Google native names",
        )
        if not isinstance(native_names, dict):
            raise ExtractionError(
                "Google native names are not an object", self.service_id().display_name
            )

        bad_codes = [
            code for code, name in native_names.items() if not isinstance(name, str)
        ]
        if bad_codes:
            raise ExtractionError(
                f"Google native names hold non-string values for {', '.join(bad_codes)}",
                self.service_id().display_name,
            )

        return dict(native_names)

    def __parse_languages(self, page: bytes) -> List[ScrapedLanguage]:
        data = self.get_callback_data(page, self.LANGUAGES_ID)
        try:
            entries = data[1]
        except (IndexError, KeyError, TypeError) as error:
            raise ExtractionError(
                f"Unexpected Google language block layout: {error}",
                self.service_id().display_name,
            ) from error

        if not isinstance(entries, list):
            raise ExtractionError(
                f"Unexpected Google language block layout: {entries!r} is not an array",
                self.service_id().display_name,
            )

        pairs = [
            self.__read_entry(entry, 2, "language block") for entry in entries
        ]
        native_names = self.get_native_names()

        languages = [
            ScrapedLanguage(
                name=name,
                iso6391=code,
                iso6393=UNKNOWN,
                native_name=native_names.get(code, UNKNOWN),
            )
            for code, name in pairs
        ]

        missing = [
            language.iso6391
            for language in languages
            if not language.is_published("native_name")
        ]
        if missing:
            LOGGER.debug(f"No native name published for {', '.join(missing)}")

        return languages

    def __parse_tts_languages(self, page: bytes) -> List[ScrapedLanguage]:
        data = self.get_callback_data(page, self.TTS_LANGUAGES_ID)
        try:
            entries = data[0]
        except (IndexError, KeyError, TypeError) as error:
            raise ExtractionError(
                f"Unexpected Google TTS block layout: {error}",
                self.service_id().display_name,
            ) from error

        if not isinstance(entries, list):
            raise ExtractionError(
                f"Unexpected Google TTS block layout: {entries!r} is not an array",
                self.service_id().display_name,
            )

        return [
            ScrapedLanguage(
                name=UNKNOWN, iso6391=self.__read_entry(entry, 1, "TTS block")[0]
            )
            for entry in entries
        ]

    def __read_entry(self, entry: Any, width: int, block: str) -> List[str]:
        """
        Check a block entry is an array starting with `width` strings
        :param entry: Entry of a data block
        :param width: How many leading strings are needed
        :param block: Block name, for error messages
        :return The leading strings
        """
        if (
            not isinstance(entry, list)
            or len(entry) < width
            or not all(isinstance(value, str) for value in entry[:width])
        ):
            raise ExtractionError(
                f"Unexpected entry in Google {block}: {entry!r}",
                self.service_id().display_name,
            )
        return entry[:width]
