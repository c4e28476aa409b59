"""
Compare a provider's language inventory with the canonical dictionary
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, AbstractSet, List, Optional

from .classes import Diagnostic, DiagnosticKind, LanguageInventory, ScrapedLanguage
from .consts.services import TranslationService
from .language_dictionary import LanguageDictionary

if TYPE_CHECKING:
    from .providers.abstract import AbstractLanguageProvider, AlternateTtsImplementation

LOGGER = logging.getLogger(__name__)


def reconcile(
    service: TranslationService,
    inventory: LanguageInventory,
    known_tts_languages: AbstractSet[ScrapedLanguage],
    language_dictionary: LanguageDictionary,
    alternate: Optional[AlternateTtsImplementation] = None,
) -> List[Diagnostic]:
    """
    Find every language and TTS language the canonical dictionary
    disagrees with the provider on. Diagnostics keep inventory order.
    :param service: Service the inventory came from
    :param inventory: Freshly fetched inventory
    :param known_tts_languages: Languages already known to support TTS
    :param language_dictionary: Canonical dictionary
    :param alternate: Second API generation to cross check TTS against
    :return Diagnostics
    """
    source = service.display_name
    diagnostics: List[Diagnostic] = []

    for language in inventory.languages:
        existing = language_dictionary.try_get_language(language.iso6391)
        if existing is None:
            diagnostics.append(
                Diagnostic(DiagnosticKind.UNKNOWN_LANGUAGE, source, language)
            )
        elif not existing.is_service_supported(service):
            diagnostics.append(
                Diagnostic(DiagnosticKind.MISSING_SERVICE_SUPPORT, source, existing)
            )

    known_tts_codes = {language.iso6391 for language in known_tts_languages}
    alternate_tts_codes = (
        {language.iso6391 for language in alternate.tts_languages}
        if alternate
        else None
    )

    for language in inventory.tts_languages:
        existing = language_dictionary.try_get_language(language.iso6391)
        if existing is None:
            diagnostics.append(
                Diagnostic(DiagnosticKind.UNKNOWN_TTS_LANGUAGE, source, language)
            )
        elif existing.iso6391 not in known_tts_codes:
            diagnostics.append(
                Diagnostic(DiagnosticKind.MISSING_TTS_SUPPORT, source, existing)
            )
        elif alternate and existing.iso6391 not in alternate_tts_codes:
            diagnostics.append(
                Diagnostic(DiagnosticKind.MISSING_TTS_SUPPORT, alternate.name, existing)
            )

    LOGGER.debug(
        f"{source}: {len(inventory.languages)} languages and "
        f"{len(inventory.tts_languages)} TTS languages produced {len(diagnostics)} diagnostics"
    )
    return diagnostics


def reconcile_provider(
    provider: AbstractLanguageProvider,
    inventory: LanguageInventory,
    language_dictionary: Optional[LanguageDictionary] = None,
) -> List[Diagnostic]:
    """
    Reconcile an inventory using everything its provider knows
    :param provider: Provider the inventory was fetched by
    :param inventory: Inventory to check
    :param language_dictionary: Canonical dictionary (default: the provider's)
    :return Diagnostics
    """
    if language_dictionary is None:
        language_dictionary = provider.language_dictionary

    return reconcile(
        provider.service_id(),
        inventory,
        provider.known_tts_languages(),
        language_dictionary,
        provider.alternate_tts_implementation(),
    )
