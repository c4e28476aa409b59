"""
Provider Dispatcher
"""

from typing import Dict, Type

from .abstract import AbstractLanguageProvider, AlternateTtsImplementation
from .google import GoogleLanguageProvider
from .microsoft import MicrosoftLanguageProvider
from .yandex import YandexLanguageProvider

PROVIDERS: Dict[str, Type[AbstractLanguageProvider]] = {
    "google": GoogleLanguageProvider,
    "yandex": YandexLanguageProvider,
    "microsoft": MicrosoftLanguageProvider,
}

__all__ = [
    "AbstractLanguageProvider",
    "AlternateTtsImplementation",
    "GoogleLanguageProvider",
    "MicrosoftLanguageProvider",
    "YandexLanguageProvider",
    "PROVIDERS",
]
