import pytest
import requests
import responses

from conftest import GOOGLE_NATIVE_NAMES_URL, GOOGLE_PAGE_URL
from langsync.classes import DiagnosticKind
from langsync.constants import UNKNOWN
from langsync.errors import ExtractionError, FetchError, MarkerNotFound
from langsync.providers import GoogleLanguageProvider
from langsync.reconciler import reconcile_provider


@pytest.fixture
def provider():
    return GoogleLanguageProvider()


def mock_google(page: bytes, native_names: bytes) -> None:
    responses.add(responses.GET, GOOGLE_PAGE_URL, body=page, status=200)
    responses.add(
        responses.GET, GOOGLE_NATIVE_NAMES_URL, body=native_names, status=200
    )


@responses.activate
def test_fetch_inventory(provider, google_page, google_native_names):
    mock_google(google_page, google_native_names)

    inventory = provider.fetch_inventory()

    assert inventory.language_codes() == ("en", "fr", "de", "yue", "xx")
    french = inventory.languages[1]
    assert french.name == "French"
    assert french.native_name == "Français"
    assert french.iso6393 == UNKNOWN
    assert [language.iso6391 for language in inventory.tts_languages] == [
        "en",
        "fr",
        "de",
        "am",
        "xx",
    ]
    assert all(language.name == UNKNOWN for language in inventory.tts_languages)


@responses.activate
def test_language_without_native_name_gets_placeholder(
    provider, google_page, google_native_names
):
    mock_google(google_page, google_native_names)

    cantonese = provider.fetch_inventory().languages[3]

    assert cantonese.iso6391 == "yue"
    assert cantonese.native_name == UNKNOWN


@responses.activate
def test_accept_language_header_is_sent(provider, google_page, google_native_names):
    mock_google(google_page, google_native_names)

    provider.fetch_inventory()

    assert len(responses.calls) == 2
    for call in responses.calls:
        assert call.request.headers["Accept-Language"] == "en"


@responses.activate
def test_reconcile_fetched_inventory(provider, google_page, google_native_names):
    mock_google(google_page, google_native_names)

    diagnostics = reconcile_provider(provider, provider.fetch_inventory())

    assert [(d.kind, d.source, d.language.iso6391) for d in diagnostics] == [
        (DiagnosticKind.UNKNOWN_LANGUAGE, "Google", "xx"),
        (DiagnosticKind.MISSING_TTS_SUPPORT, "Google", "am"),
        (DiagnosticKind.UNKNOWN_TTS_LANGUAGE, "Google", "xx"),
    ]


def test_get_callback_data(provider, google_page):
    assert provider.get_callback_data(google_page, b"ycyxUb") == [
        [["en"], ["fr"], ["de"], ["am"], ["xx"]]
    ]


def test_alternate_tts_covers_known_tts(provider):
    alternate = provider.alternate_tts_implementation()

    assert alternate is not None
    assert alternate.name == "GoogleTranslator2"
    assert provider.known_tts_languages() <= alternate.tts_languages


@responses.activate
def test_missing_callback_marker(provider, google_page, google_native_names):
    drifted = google_page.replace(b"AF_initDataCallback", b"AF_dataCallback")
    mock_google(drifted, google_native_names)

    with pytest.raises(MarkerNotFound):
        provider.fetch_inventory()


@responses.activate
def test_missing_block_id(provider, google_page, google_native_names):
    mock_google(google_page.replace(b"n9wk7", b"zzzzz"), google_native_names)

    with pytest.raises(MarkerNotFound) as error:
        provider.fetch_inventory()

    assert error.value.marker == b"n9wk7"


@responses.activate
def test_unexpected_block_layout(provider, google_page, google_native_names):
    # Language block without its language list
    broken = google_page.replace(
        b'data:[[["auto","Detect language"]],[["en","English"],["fr","French"],'
        b'["de","German"],["yue","Cantonese"],["xx","Mystery"]]]',
        b"data:[null]",
    )
    mock_google(broken, google_native_names)

    with pytest.raises(ExtractionError, match="language block layout"):
        provider.fetch_inventory()


@responses.activate
def test_native_names_failure_fails_inventory(provider, google_page):
    responses.add(responses.GET, GOOGLE_PAGE_URL, body=google_page, status=200)
    responses.add(responses.GET, GOOGLE_NATIVE_NAMES_URL, status=404)

    with pytest.raises(FetchError) as error:
        provider.fetch_inventory()

    assert error.value.service == "Google"
    assert error.value.url == GOOGLE_NATIVE_NAMES_URL


@responses.activate
def test_page_unreachable(provider):
    responses.add(
        responses.GET,
        GOOGLE_PAGE_URL,
        body=requests.exceptions.ConnectionError("connection refused"),
    )

    with pytest.raises(FetchError, match="connection refused"):
        provider.fetch_inventory()


@pytest.mark.parametrize(
    "block, replacement",
    [
        pytest.param(
            b'data:[[["en"],["fr"],["de"],["am"],["xx"]]]',
            b'data:[["en","fr"]]',
            id="TTS codes not wrapped in arrays",
        ),
        pytest.param(
            b'data:[[["en"],["fr"],["de"],["am"],["xx"]]]',
            b'data:[[["en"],[null]]]',
            id="TTS code not a string",
        ),
        pytest.param(
            b'data:[[["en"],["fr"],["de"],["am"],["xx"]]]',
            b"data:[null]",
            id="TTS entries not an array",
        ),
        pytest.param(
            b'["yue","Cantonese"]',
            b'["yue",null]',
            id="language name not a string",
        ),
        pytest.param(
            b'["yue","Cantonese"]',
            b'"yue"',
            id="language pair not an array",
        ),
        pytest.param(
            b'["xx","Mystery"]',
            b'["xx"]',
            id="language pair too short",
        ),
    ],
)
@responses.activate
def test_malformed_block_entries(
    provider, google_page, google_native_names, block, replacement
):
    assert block in google_page
    mock_google(google_page.replace(block, replacement), google_native_names)

    with pytest.raises(ExtractionError, match="Unexpected"):
        provider.fetch_inventory()


@responses.activate
def test_non_string_native_name(provider, google_page, google_native_names):
    broken = google_native_names.replace(b"'Deutsch'", b"null")
    assert broken != google_native_names
    mock_google(google_page, broken)

    with pytest.raises(ExtractionError, match="non-string values for de"):
        provider.fetch_inventory()


@responses.activate
def test_native_name_misses_are_logged(
    provider, google_page, google_native_names, caplog
):
    caplog.set_level("DEBUG", logger="langsync.providers.google")
    mock_google(google_page, google_native_names)

    provider.fetch_inventory()

    assert "No native name published for yue" in caplog.text
