"""
langsync data classes
"""

from .diagnostic import Diagnostic, DiagnosticKind
from .json_object import JsonObject
from .language_inventory import LanguageInventory
from .scraped_language import ScrapedLanguage

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "JsonObject",
    "LanguageInventory",
    "ScrapedLanguage",
]
