"""
Languages each Google API generation is already known to speak.

Codes are Google's own and may be aliases (iw, jv) of a canonical
ISO 639-1 code; resolve them through the language dictionary.
"""

from __future__ import annotations

from typing import Final

GOOGLE_TTS_LANGUAGE_CODES: Final[tuple[str, ...]] = (
    "af", "ar", "bg", "bn", "bs", "ca", "cs", "cy", "da", "de", "el", "en",
    "eo", "es", "et", "fi", "fr", "gu", "hi", "hr", "hu", "hy", "id", "is",
    "it", "iw", "ja", "jv", "km", "kn", "ko", "la", "lv", "mk", "ml", "mr",
    "ms", "my", "ne", "nl", "no", "pl", "pt", "ro", "ru", "si", "sk", "sq",
    "sr", "su", "sv", "sw", "ta", "te", "th", "tl", "tr", "uk", "ur", "vi",
    "zh-CN", "zh-TW",
)
"""TTS languages of the classic translate_a/single API."""

GOOGLE2_TTS_LANGUAGE_CODES: Final[tuple[str, ...]] = (
    "af", "am", "ar", "bg", "bn", "bs", "ca", "cs", "cy", "da", "de", "el",
    "en", "eo", "es", "et", "eu", "fi", "fr", "gl", "gu", "ha", "hi", "hr",
    "hu", "hy", "id", "is", "it", "iw", "ja", "jv", "km", "kn", "ko", "la",
    "lt", "lv", "mk", "ml", "mr", "ms", "my", "ne", "nl", "no", "pa", "pl",
    "pt", "pt-PT", "ro", "ru", "si", "sk", "sq", "sr", "su", "sv", "sw", "ta",
    "te", "th", "tl", "tr", "uk", "ur", "vi", "yue", "zh-CN", "zh-TW",
)
"""TTS languages of the batchexecute RPC API (GoogleTranslator2)."""
