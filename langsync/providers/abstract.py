"""
API for how providers need to interact with other classes
"""
from __future__ import annotations

import abc
import logging
from typing import (
    Any,
    Dict,
    FrozenSet,
    NamedTuple,
    Optional,
    Set,
    Tuple,
    Union,
)

import requests
import requests_cache

from ..classes import LanguageInventory, ScrapedLanguage
from ..consts.services import TranslationService
from ..errors import FetchError
from ..langsync_config import LangsyncConfig
from ..language_dictionary import LanguageDictionary, default_language_dictionary
from ..retryable_session import retryable_session

LOGGER = logging.getLogger(__name__)


class AlternateTtsImplementation(NamedTuple):
    """
    A second API generation of the same service with its own TTS coverage
    """

    name: str
    tts_languages: FrozenSet[ScrapedLanguage]


class AbstractLanguageProvider(abc.ABC):
    """
    Abstract class to indicate what other providers should provide
    """

    session: Union[requests.Session, requests_cache.CachedSession]
    language_dictionary: LanguageDictionary

    def __init__(
        self,
        headers: Optional[Dict[str, str]] = None,
        language_dictionary: Optional[LanguageDictionary] = None,
    ) -> None:
        super().__init__()
        self.language_dictionary = (
            language_dictionary
            if language_dictionary is not None
            else default_language_dictionary()
        )
        self.session = retryable_session(cache_name=self.get_class_name())
        self.session.headers.update(headers or self._build_http_header())

    # Abstract Methods
    @abc.abstractmethod
    def _build_http_header(self) -> Dict[str, str]:
        """
        Construct any extra HTTP headers the service needs
        :return: Headers
        """

    @abc.abstractmethod
    def service_id(self) -> TranslationService:
        """
        :return: Service this provider scrapes
        """

    @abc.abstractmethod
    def known_tts_languages(self) -> Set[ScrapedLanguage]:
        """
        Languages this service is already known to support for TTS
        :return: Known TTS languages
        """

    @abc.abstractmethod
    def alternate_tts_implementation(self) -> Optional[AlternateTtsImplementation]:
        """
        :return: Parallel API generation to cross check TTS coverage against, if any
        """

    @abc.abstractmethod
    def fetch_inventory(self) -> LanguageInventory:
        """
        Download and extract this service's language inventory.
        Never returns a partially populated inventory.
        :return: Inventory
        """

    def download(
        self, url: str, params: Optional[Dict[str, Union[str, int]]] = None
    ) -> bytes:
        """
        Download a resource as raw bytes
        :param url: URL to download content from
        :param params: Options to give to the GET request
        :return: Response body
        """
        service = self.service_id().display_name
        try:
            response = self.session.get(url, params=params)
        except requests.exceptions.RequestException as error:
            raise FetchError(
                f"Unable to download from {service}: {error}", url, service
            ) from error

        self.log_download(response)
        if not response.ok:
            LOGGER.error(
                f"{service} Download Error ({response.status_code}): {response.url}"
            )
            raise FetchError(
                f"{service} responded with HTTP {response.status_code}", url, service
            )

        content: bytes = response.content
        return content

    def set_session(self, session: requests.Session) -> None:
        """
        Override the HTTP session (primarily for test injection).
        :param session: Custom session to use for HTTP requests
        """
        self.session = session

    def resolve_languages(self, codes: Tuple[str, ...]) -> Set[ScrapedLanguage]:
        """
        Turn service language codes into canonical language records
        :param codes: Codes (or aliases) to resolve
        :return: Canonical records
        """
        return {
            self.language_dictionary.get_language(code).to_scraped_language()
            for code in codes
        }

    # Class Methods
    @classmethod
    def get_class_name(cls) -> str:
        """
        Get the name of the calling class
        :return: Calling class name
        """
        return cls.__name__

    @staticmethod
    def log_download(response: Any) -> None:
        """
        Log how the URL was acquired
        :param response: Response from Server
        """
        from_cache = (
            getattr(response, "from_cache", False)
            if LangsyncConfig().use_cache
            else False
        )
        LOGGER.debug(f"Downloaded {response.url} (Cache = {from_cache})")
