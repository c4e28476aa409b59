"""
Constant tables shared across providers
"""

from .services import TranslationService
from .tts_languages import GOOGLE2_TTS_LANGUAGE_CODES, GOOGLE_TTS_LANGUAGE_CODES

__all__ = [
    "TranslationService",
    "GOOGLE_TTS_LANGUAGE_CODES",
    "GOOGLE2_TTS_LANGUAGE_CODES",
]
