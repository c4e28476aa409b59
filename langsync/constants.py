"""
langsync Constants that cannot be changed and are hardcoded intentionally
"""

import datetime
import os
import pathlib

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("langsync").joinpath("resources")
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("langsync.properties")
LANGUAGES_PATH: pathlib.Path = RESOURCE_PATH.joinpath("languages.json")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("LANGSYNC_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)

LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("langsync_logs")

CACHE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath(".langsync_cache")

LANGSYNC_BUILD_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

# Sentinel for any field a provider payload does not publish
UNKNOWN: str = "?"

DEFAULT_ACCEPT_LANGUAGE: str = "en"
DEFAULT_TIMEOUT: int = 30
DEFAULT_RETRIES: int = 0
DEFAULT_MAX_WORKERS: int = 3

GOOGLE_PAGE_URL: str = "https://translate.google.com/"
GOOGLE_NATIVE_NAMES_URL: str = "https://ssl.gstatic.com/inputtools/js/ln/17/en.js"
YANDEX_PAGE_URL: str = "https://translate.yandex.com/"
MICROSOFT_LANGUAGES_URL: str = "https://api.cognitive.microsofttranslator.com/languages"
MICROSOFT_API_VERSION: str = "3.0"

USER_AGENT: str = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:120.0) Gecko/20100101 Firefox/120.0"
)
