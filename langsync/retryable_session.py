"""
Retryable Session to download content
"""
import datetime
import functools
from typing import Optional, Union

import requests
import requests.adapters
import requests_cache
import urllib3

from . import constants
from .langsync_config import LangsyncConfig


def retryable_session(
    retries: Optional[int] = None,
    cache_name: str = "langsync",
) -> Union[requests.Session, requests_cache.CachedSession]:
    """
    Session used by a single provider for every one of its downloads.
    Transport retries are opt-in through the config; a failed request
    surfaces to the caller instead of being retried silently.
    :param retries: How many retries to attempt (None = use config)
    :param cache_name: Name of the on-disk cache, if caching is enabled
    :return: Session that does the downloading
    """
    config = LangsyncConfig()
    if retries is None:
        retries = config.retries

    session: Union[requests.Session, requests_cache.CachedSession]
    if config.use_cache:
        constants.CACHE_PATH.mkdir(parents=True, exist_ok=True)
        session = requests_cache.CachedSession(
            cache_name=str(constants.CACHE_PATH.joinpath(cache_name)),
            expire_after=datetime.timedelta(days=1),
        )
    else:
        session = requests.Session()

    retry = urllib3.util.retry.Retry(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=0.3,
        status_forcelist=(500, 502, 504),
        raise_on_status=False,
    )

    adapter = requests.adapters.HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.request = functools.partial(session.request, timeout=config.timeout)  # type: ignore

    session.headers.update(
        {
            "User-Agent": constants.USER_AGENT,
            "Accept-Language": config.accept_language,
        }
    )
    return session
