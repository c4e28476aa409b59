"""
langsync, language inventory scraper and reconciler
MIT License
"""

from ._version import __version__
from .language_dictionary import CanonicalLanguage, LanguageDictionary
from .reconciler import reconcile, reconcile_provider

__all__ = [
    "__version__",
    "CanonicalLanguage",
    "LanguageDictionary",
    "reconcile",
    "reconcile_provider",
]
