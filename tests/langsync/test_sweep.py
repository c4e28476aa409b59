import json
import threading
from typing import Dict, Optional, Set

import pytest

from langsync.arg_parser import parse_args
from langsync.classes import DiagnosticKind, LanguageInventory, ScrapedLanguage
from langsync.consts import TranslationService
from langsync.errors import FetchError, MarkerNotFound
from langsync.language_dictionary import LanguageDictionary
from langsync.output_generator import build_report, write_report
from langsync.providers import AbstractLanguageProvider, AlternateTtsImplementation
from langsync.sweep import report_result, run_sweep, scan_provider


class StubProvider(AbstractLanguageProvider):
    """Provider returning a canned inventory, or raising a canned error"""

    def __init__(self, service, inventory=None, error=None, **kwargs):
        super().__init__(**kwargs)
        self.service = service
        self.inventory = inventory
        self.error = error
        self.thread_name: Optional[str] = None

    def _build_http_header(self) -> Dict[str, str]:
        return {}

    def service_id(self) -> TranslationService:
        return self.service

    def known_tts_languages(self) -> Set[ScrapedLanguage]:
        return set()

    def alternate_tts_implementation(self) -> Optional[AlternateTtsImplementation]:
        return None

    def fetch_inventory(self) -> LanguageInventory:
        self.thread_name = threading.current_thread().name
        if self.error is not None:
            raise self.error
        return self.inventory


def mystery_inventory() -> LanguageInventory:
    return LanguageInventory.build([ScrapedLanguage(name="Mystery", iso6391="xx")])


@pytest.fixture
def providers(small_dictionary):
    return [
        StubProvider(
            TranslationService.GOOGLE,
            error=MarkerNotFound(b"n9wk7", service="Google"),
            language_dictionary=small_dictionary,
        ),
        StubProvider(
            TranslationService.YANDEX,
            inventory=mystery_inventory(),
            language_dictionary=small_dictionary,
        ),
        StubProvider(
            TranslationService.MICROSOFT,
            error=FetchError("HTTP 503", "https://example.invalid", "Microsoft"),
            language_dictionary=small_dictionary,
        ),
    ]


def test_scan_provider_records_failure(providers):
    result = scan_provider(providers[0])

    assert not result.succeeded
    assert result.service == "Google"
    assert isinstance(result.error, MarkerNotFound)
    assert result.diagnostics == []


def test_scan_provider_success(providers):
    result = scan_provider(providers[1])

    assert result.succeeded
    assert [d.kind for d in result.diagnostics] == [DiagnosticKind.UNKNOWN_LANGUAGE]


@pytest.mark.parametrize("parallel", [True, False])
def test_failures_are_isolated(providers, parallel):
    results = run_sweep(providers, parallel=parallel)

    assert [result.service for result in results] == ["Google", "Yandex", "Microsoft"]
    assert [result.succeeded for result in results] == [False, True, False]
    assert len(results[1].diagnostics) == 1
    assert results[1].diagnostics[0].source == "Yandex"


def test_parallel_sweep_uses_worker_threads(providers):
    run_sweep(providers, max_workers=3)

    main_thread = threading.current_thread().name
    assert all(provider.thread_name != main_thread for provider in providers)


def test_sequential_sweep_stays_on_calling_thread(providers):
    run_sweep(providers, parallel=False)

    main_thread = threading.current_thread().name
    assert all(provider.thread_name == main_thread for provider in providers)


def test_sweep_of_nothing():
    assert run_sweep([]) == []


def test_sweep_uses_given_dictionary(small_dictionary, small_dictionary_content):
    small_dictionary_content["languages"] = small_dictionary_content["languages"][:1]
    provider = StubProvider(
        TranslationService.GOOGLE,
        inventory=LanguageInventory.build(
            [ScrapedLanguage(name="French", iso6391="fr")]
        ),
        language_dictionary=small_dictionary,
    )
    english_only = LanguageDictionary.from_json(small_dictionary_content)

    assert scan_provider(provider).diagnostics == []
    assert len(scan_provider(provider, english_only).diagnostics) == 1


def test_report_result_brackets_diagnostics(providers, caplog):
    caplog.set_level("INFO")
    report_result(scan_provider(providers[1]))

    messages = [record.getMessage() for record in caplog.records]
    assert messages[-3:] == [
        "Started displaying missing languages for Yandex.",
        "Missing Language (from Yandex): "
        "Name: 'Mystery', NativeName: '?', ISO6391: xx, ISO6393: ?",
        "Stopped displaying missing languages for Yandex.",
    ]


def test_write_report(providers, tmp_path):
    results = run_sweep(providers)
    report_path = tmp_path / "out" / "report.json"

    write_report(report_path, results, pretty_print=True)

    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report == json.loads(json.dumps(build_report(results)))
    assert list(report["data"]) == ["Google", "Yandex", "Microsoft"]
    assert report["data"]["Google"]["error"].startswith("Marker b'n9wk7' not found")
    assert report["data"]["Yandex"]["error"] is None
    assert report["data"]["Yandex"]["diagnostics"][0]["kind"] == "unknownLanguage"
    assert report["meta"]["version"]


def test_parse_args_defaults_to_every_provider():
    args = parse_args([])

    assert args.providers == ["google", "yandex", "microsoft"]
    assert not args.sequential
    assert args.output is None


def test_parse_args_selection():
    args = parse_args(["-p", "Yandex", "microsoft", "--sequential", "-o", "r.json"])

    assert args.providers == ["yandex", "microsoft"]
    assert args.sequential
    assert args.output.name == "r.json"


def test_parse_args_rejects_unknown_provider():
    with pytest.raises(SystemExit):
        parse_args(["--providers", "deepl"])


def test_parse_args_from_environment(monkeypatch):
    monkeypatch.setenv("PROVIDERS", "google, yandex")
    monkeypatch.setenv("SEQUENTIAL", "1")

    args = parse_args(["--use-envvars"])

    assert args.providers == ["google", "yandex"]
    assert args.sequential


def test_parse_args_environment_flags_are_set_by_any_value(monkeypatch):
    monkeypatch.setenv("SEQUENTIAL", "false")
    monkeypatch.delenv("PRETTY", raising=False)
    monkeypatch.delenv("PROVIDERS", raising=False)

    args = parse_args(["--use-envvars"])

    assert args.sequential
    assert not args.pretty
    assert args.providers == ["google", "yandex", "microsoft"]
