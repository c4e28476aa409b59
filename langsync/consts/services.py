"""
Translation services known to the canonical language dictionary.
"""

from __future__ import annotations

from enum import Enum


class TranslationService(Enum):
    """Translation services a language can be supported by."""

    GOOGLE = "google"
    BING = "bing"
    YANDEX = "yandex"
    MICROSOFT = "microsoft"

    @property
    def display_name(self) -> str:
        """Name used when reporting on this service."""
        return self.value.title()

    @classmethod
    def from_name(cls, name: str) -> TranslationService:
        """
        Resolve a service from its value or display name, ignoring case
        :param name: Service name
        :return: Matching service
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown translation service: {name!r}") from None
