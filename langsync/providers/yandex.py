"""
Yandex.Translate language scraper
"""

import logging
from typing import Dict, Optional, Set

from ..classes import LanguageInventory, ScrapedLanguage
from ..constants import UNKNOWN, YANDEX_PAGE_URL
from ..consts.services import TranslationService
from ..errors import ExtractionError
from ..extraction import parse_json, slice_between
from ..langsync_config import LangsyncConfig
from ..language_dictionary import LanguageDictionary
from .abstract import AbstractLanguageProvider, AlternateTtsImplementation

LOGGER = logging.getLogger(__name__)


class YandexLanguageProvider(AbstractLanguageProvider):
    """
    Scrapes the translate.yandex.com page, which inlines a flat
    code => English name object in its page config
    """

    TRANSLATOR_LANGS_START: bytes = b"TRANSLATOR_LANGS: "
    TRANSLATOR_LANGS_END: bytes = b",\n"

    page_url: str

    def __init__(self, language_dictionary: Optional[LanguageDictionary] = None):
        super().__init__(language_dictionary=language_dictionary)
        self.page_url = LangsyncConfig().get("Yandex", "page_url", YANDEX_PAGE_URL)

    def _build_http_header(self) -> Dict[str, str]:
        return {}

    def service_id(self) -> TranslationService:
        return TranslationService.YANDEX

    def known_tts_languages(self) -> Set[ScrapedLanguage]:
        # Yandex does not publish TTS languages
        return set()

    def alternate_tts_implementation(self) -> Optional[AlternateTtsImplementation]:
        return None

    def fetch_inventory(self) -> LanguageInventory:
        page = self.download(self.page_url)
        translator_langs = parse_json(
            slice_between(page, self.TRANSLATOR_LANGS_START, self.TRANSLATOR_LANGS_END),
            "Yandex TRANSLATOR_LANGS",
        )
        if not isinstance(translator_langs, dict):
            raise ExtractionError(
                "Yandex TRANSLATOR_LANGS is not an object",
                self.service_id().display_name,
            )

        bad_codes = [
            code for code, name in translator_langs.items() if not isinstance(name, str)
        ]
        if bad_codes:
            raise ExtractionError(
                f"Yandex TRANSLATOR_LANGS has non-string names for {', '.join(bad_codes)}",
                self.service_id().display_name,
            )

        languages = [
            ScrapedLanguage(name=name, iso6391=code, iso6393=UNKNOWN)
            for code, name in translator_langs.items()
        ]
        LOGGER.info(f"Yandex: {len(languages)} languages")

        return LanguageInventory.build(languages)
