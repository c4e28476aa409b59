"""Microsoft Translator languages endpoint data models."""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class MicrosoftLanguage(BaseModel):
    """Translation language entry."""

    name: str
    native_name: str = Field(alias="nativeName")
    dir: Optional[str] = None


class MicrosoftLanguagesResponse(BaseModel):
    """Body of GET /languages?scope=translation."""

    translation: Dict[str, MicrosoftLanguage]
