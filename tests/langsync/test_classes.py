import dataclasses

import pytest

import langsync
from langsync.classes import LanguageInventory, ScrapedLanguage
from langsync.langsync_config import LangsyncConfig


def test_scraped_language_is_immutable():
    language = ScrapedLanguage(name="English", iso6391="en")

    with pytest.raises(dataclasses.FrozenInstanceError):
        language.name = "Anglais"


def test_scraped_language_placeholders():
    language = ScrapedLanguage(name="Test", iso6391="xx-Test", native_name="")

    assert not language.is_published("iso6393")
    assert language.is_published("native_name")
    assert str(language) == "Name: 'Test', NativeName: '', ISO6391: xx-Test, ISO6393: ?"


def test_inventory_stores_tuples():
    languages = [ScrapedLanguage(name="English", iso6391="en")]
    inventory = LanguageInventory(languages)
    languages.append(ScrapedLanguage(name="French", iso6391="fr"))

    assert inventory.languages == (ScrapedLanguage(name="English", iso6391="en"),)
    assert inventory.tts_languages == ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        inventory.languages = ()


def test_bundled_config():
    config = LangsyncConfig()

    assert config.langsync_version == "1.0.0"
    assert langsync.__version__ == config.langsync_version
    assert not config.use_cache
    assert config.accept_language == "en"
    assert config.retries == 0
    assert config.max_workers == 3


def test_config_defaults_without_file(tmp_path):
    config = LangsyncConfig.__wrapped__(tmp_path / "missing.properties")

    assert config.langsync_version.startswith("1.X.X+")
    assert config.timeout == 30
    assert config.retries == 0
    assert config.get("Google", "page_url", "fallback") == "fallback"


def test_config_rejects_non_integer(tmp_path):
    path = tmp_path / "langsync.properties"
    path.write_text("[Network]\ntimeout=soon\nmax_workers=8\n", encoding="utf-8")

    config = LangsyncConfig.__wrapped__(path)

    assert config.timeout == 30
    assert config.max_workers == 8
