"""
Canonical language dictionary that scraped languages are checked against
"""

from __future__ import annotations

import functools
import json
import logging
import pathlib
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Mapping, Optional

from . import constants
from .classes.scraped_language import ScrapedLanguage
from .consts.services import TranslationService

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CanonicalLanguage:
    """
    Reference entry for one language, keyed by ISO 639-1 code
    """

    name: str
    native_name: str
    iso6391: str
    iso6393: str
    supported_services: FrozenSet[TranslationService]

    def is_service_supported(self, service: TranslationService) -> bool:
        """
        Check if a translation service supports this language
        :param service: Service to check
        :return If supported
        """
        return service in self.supported_services

    def to_scraped_language(self) -> ScrapedLanguage:
        """
        :return This entry as a normalized language record
        """
        return ScrapedLanguage(
            name=self.name,
            iso6391=self.iso6391,
            iso6393=self.iso6393,
            native_name=self.native_name,
        )

    def to_json(self) -> Dict[str, Any]:
        """
        Support json.dump()
        :return: JSON serialized object
        """
        return {
            "name": self.name,
            "nativeName": self.native_name,
            "iso6391": self.iso6391,
            "iso6393": self.iso6393,
            "supportedServices": sorted(s.value for s in self.supported_services),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalLanguage):
            return NotImplemented
        return self.iso6391 == other.iso6391

    def __hash__(self) -> int:
        return hash(self.iso6391)

    def __str__(self) -> str:
        return (
            f"Name: '{self.name}', NativeName: '{self.native_name}', "
            f"ISO6391: {self.iso6391}, ISO6393: {self.iso6393}"
        )


class LanguageDictionary(Mapping[str, CanonicalLanguage]):
    """
    Read-only mapping of ISO 639-1 code to CanonicalLanguage.
    Codes and aliases are matched without regard to case.
    """

    _languages: Dict[str, CanonicalLanguage]
    _by_folded_code: Dict[str, str]
    aliases: Dict[str, str]

    def __init__(
        self,
        languages: Iterable[CanonicalLanguage],
        aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._languages = {}
        for language in languages:
            if language.iso6391 in self._languages:
                raise ValueError(f"Duplicate language code {language.iso6391}")
            self._languages[language.iso6391] = language

        self._by_folded_code = {code.casefold(): code for code in self._languages}
        self.aliases = self.__build_aliases(aliases or {})

    @classmethod
    def from_json(cls, content: Mapping[str, Any]) -> LanguageDictionary:
        """
        Build a dictionary from the languages.json resource layout
        :param content: Parsed resource content
        :return Dictionary
        """
        languages = [
            CanonicalLanguage(
                name=entry["name"],
                native_name=entry["nativeName"],
                iso6391=entry["iso6391"],
                iso6393=entry["iso6393"],
                supported_services=frozenset(
                    TranslationService.from_name(service)
                    for service in entry["services"]
                ),
            )
            for entry in content.get("languages", [])
        ]
        return cls(languages, content.get("aliases", {}))

    @classmethod
    def from_file(cls, file_path: pathlib.Path) -> LanguageDictionary:
        """
        Load a dictionary from a JSON resource
        :param file_path: Path to the resource
        :return Dictionary
        """
        with file_path.open(encoding="utf-8") as f:
            dictionary = cls.from_json(json.load(f))

        LOGGER.debug(
            f"Loaded {len(dictionary)} languages and "
            f"{len(dictionary.aliases)} aliases from {file_path.name}"
        )
        return dictionary

    def try_get_language(self, code: str) -> Optional[CanonicalLanguage]:
        """
        Find a language by code, name or alias
        :param code: ISO 639-1 code, ISO 639-3 code, name or alias
        :return Language if found, else None
        """
        if not code:
            return None

        folded = code.casefold()
        iso6391 = self._by_folded_code.get(folded) or self.aliases.get(folded)
        if iso6391 is None:
            return None

        return self._languages[iso6391]

    def get_language(self, code: str) -> CanonicalLanguage:
        """
        Find a language by code, name or alias
        :param code: ISO 639-1 code, ISO 639-3 code, name or alias
        :return Language
        """
        language = self.try_get_language(code)
        if language is None:
            raise KeyError(f"Unknown language {code!r}")
        return language

    def __getitem__(self, key: str) -> CanonicalLanguage:
        return self._languages[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __build_aliases(self, explicit_aliases: Mapping[str, str]) -> Dict[str, str]:
        """
        Explicit aliases first, then every language's name, native name
        and ISO 639-3 code (these win on conflict)
        :param explicit_aliases: Alias => ISO 639-1 code
        :return Folded alias => ISO 639-1 code
        """
        aliases: Dict[str, str] = {}
        for alias, iso6391 in explicit_aliases.items():
            if iso6391 not in self._languages:
                LOGGER.warning(f"Alias {alias} points to unknown code {iso6391}")
                continue
            aliases[alias.casefold()] = iso6391

        for iso6391, language in self._languages.items():
            aliases[language.name.casefold()] = iso6391
            aliases[language.native_name.casefold()] = iso6391
            aliases[language.iso6393.casefold()] = iso6391

        return aliases


@functools.lru_cache(maxsize=None)
def default_language_dictionary() -> LanguageDictionary:
    """
    Dictionary bundled with langsync, loaded once per process
    :return Dictionary
    """
    return LanguageDictionary.from_file(constants.LANGUAGES_PATH)
