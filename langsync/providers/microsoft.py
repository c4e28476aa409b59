"""
Microsoft Azure Translator language provider
"""

import logging
from typing import Dict, Optional, Set

import pydantic

from ..classes import LanguageInventory, ScrapedLanguage
from ..constants import MICROSOFT_API_VERSION, MICROSOFT_LANGUAGES_URL, UNKNOWN
from ..consts.services import TranslationService
from ..errors import ExtractionError
from ..langsync_config import LangsyncConfig
from ..language_dictionary import LanguageDictionary
from .abstract import AbstractLanguageProvider, AlternateTtsImplementation
from .microsoft_models import MicrosoftLanguagesResponse

LOGGER = logging.getLogger(__name__)


class MicrosoftLanguageProvider(AbstractLanguageProvider):
    """
    Reads the public languages endpoint of the Translator v3 API
    """

    languages_url: str

    def __init__(self, language_dictionary: Optional[LanguageDictionary] = None):
        super().__init__(language_dictionary=language_dictionary)
        self.languages_url = LangsyncConfig().get(
            "Microsoft", "languages_url", MICROSOFT_LANGUAGES_URL
        )

    def _build_http_header(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def service_id(self) -> TranslationService:
        return TranslationService.MICROSOFT

    def known_tts_languages(self) -> Set[ScrapedLanguage]:
        # TTS voices are not part of the languages endpoint
        return set()

    def alternate_tts_implementation(self) -> Optional[AlternateTtsImplementation]:
        return None

    def fetch_inventory(self) -> LanguageInventory:
        content = self.download(
            self.languages_url,
            params={"api-version": MICROSOFT_API_VERSION, "scope": "translation"},
        )
        try:
            response = MicrosoftLanguagesResponse.model_validate_json(content)
        except pydantic.ValidationError as error:
            raise ExtractionError(
                f"Unexpected Microsoft languages response: {error}",
                self.service_id().display_name,
            ) from error

        languages = [
            ScrapedLanguage(
                name=entry.name,
                iso6391=code,
                iso6393=UNKNOWN,
                native_name=entry.native_name,
            )
            for code, entry in response.translation.items()
        ]
        LOGGER.info(f"Microsoft: {len(languages)} languages")

        return LanguageInventory.build(languages)
