"""
Drift findings produced by reconciliation
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Union

from .json_object import JsonObject
from .scraped_language import ScrapedLanguage

if TYPE_CHECKING:
    from ..language_dictionary import CanonicalLanguage


class DiagnosticKind(enum.Enum):
    """
    What kind of drift was found
    """

    UNKNOWN_LANGUAGE = "unknownLanguage"
    MISSING_SERVICE_SUPPORT = "missingServiceSupport"
    UNKNOWN_TTS_LANGUAGE = "unknownTtsLanguage"
    MISSING_TTS_SUPPORT = "missingTtsSupport"


_TEMPLATES: Dict[DiagnosticKind, str] = {
    DiagnosticKind.UNKNOWN_LANGUAGE: "Missing Language (from {source}): {language}",
    DiagnosticKind.MISSING_SERVICE_SUPPORT: "Missing support for {source}: {language}",
    DiagnosticKind.UNKNOWN_TTS_LANGUAGE: "Missing Language (from {source} TTS list): {language}",
    DiagnosticKind.MISSING_TTS_SUPPORT: "Missing TTS support for {source}: {language}",
}


@dataclass(frozen=True)
class Diagnostic(JsonObject):
    """
    One finding about one language.
    source is the service (or alternate API implementation) the
    finding is about; language is the scraped record for unknown
    languages and the canonical entry otherwise.
    """

    kind: DiagnosticKind
    source: str
    language: Union[ScrapedLanguage, CanonicalLanguage]

    def render(self) -> str:
        """
        :return Single line description of the finding
        """
        return _TEMPLATES[self.kind].format(source=self.source, language=self.language)

    def to_json(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "source": self.source,
            "language": self.language.to_json(),
            "message": self.render(),
        }

    def __str__(self) -> str:
        return self.render()
