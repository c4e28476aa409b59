"""
Everything a single provider fetch produced
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .scraped_language import ScrapedLanguage


@dataclass(frozen=True)
class LanguageInventory:
    """
    Languages and TTS languages of one provider, in source order
    """

    languages: Tuple[ScrapedLanguage, ...] = ()
    tts_languages: Tuple[ScrapedLanguage, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store immutable tuples
        object.__setattr__(self, "languages", tuple(self.languages))
        object.__setattr__(self, "tts_languages", tuple(self.tts_languages))

    @classmethod
    def build(
        cls,
        languages: Iterable[ScrapedLanguage],
        tts_languages: Iterable[ScrapedLanguage] = (),
    ) -> "LanguageInventory":
        """
        Build an inventory from any iterables of languages
        :param languages: Translation languages
        :param tts_languages: Text-to-speech languages
        :return Inventory
        """
        return cls(tuple(languages), tuple(tts_languages))

    def language_codes(self) -> Tuple[str, ...]:
        """
        :return ISO 639-1 codes of the translation languages, in source order
        """
        return tuple(language.iso6391 for language in self.languages)
