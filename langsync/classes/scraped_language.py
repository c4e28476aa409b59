"""
Language as published by a provider
"""

from dataclasses import dataclass

from ..constants import UNKNOWN
from .json_object import JsonObject


@dataclass(frozen=True)
class ScrapedLanguage(JsonObject):
    """
    Normalized language record produced by every provider.
    Fields a provider does not publish hold UNKNOWN, so an empty
    string always means the provider sent an empty string.
    """

    name: str
    iso6391: str
    iso6393: str = UNKNOWN
    native_name: str = UNKNOWN

    def is_published(self, field_name: str) -> bool:
        """
        Check if the provider supplied a value for a field
        :param field_name: Attribute name (ex: native_name)
        :return If the field holds real data
        """
        return getattr(self, field_name) != UNKNOWN

    def __str__(self) -> str:
        return (
            f"Name: '{self.name}', NativeName: '{self.native_name}', "
            f"ISO6391: {self.iso6391}, ISO6393: {self.iso6393}"
        )
