"""
Run every provider and collect their diagnostics
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .classes import Diagnostic
from .langsync_config import LangsyncConfig
from .language_dictionary import LanguageDictionary
from .providers.abstract import AbstractLanguageProvider
from .reconciler import reconcile_provider

LOGGER = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """
    Outcome of one provider's run
    """

    service: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        """If the provider's inventory was fetched and reconciled"""
        return self.error is None


def scan_provider(
    provider: AbstractLanguageProvider,
    language_dictionary: Optional[LanguageDictionary] = None,
) -> SweepResult:
    """
    Fetch and reconcile a single provider. Any failure is recorded
    on the result so it can't stop other providers.
    :param provider: Provider to run
    :param language_dictionary: Canonical dictionary (default: the provider's)
    :return Result of the run
    """
    service = provider.service_id().display_name
    try:
        inventory = provider.fetch_inventory()
        diagnostics = reconcile_provider(provider, inventory, language_dictionary)
    except Exception as error:
        LOGGER.error(f"Failed to scan {service}: {error}")
        return SweepResult(service, error=error)

    return SweepResult(service, diagnostics)


def run_sweep(
    providers: Sequence[AbstractLanguageProvider],
    language_dictionary: Optional[LanguageDictionary] = None,
    parallel: bool = True,
    max_workers: Optional[int] = None,
) -> List[SweepResult]:
    """
    Scan every provider, concurrently unless told otherwise
    :param providers: Providers to scan
    :param language_dictionary: Canonical dictionary (default: each provider's)
    :param parallel: Run one task per provider on a thread pool
    :param max_workers: Pool size (default: from config)
    :return Results, in the same order as providers
    """
    if not parallel or len(providers) < 2:
        return [scan_provider(provider, language_dictionary) for provider in providers]

    workers = max_workers or LangsyncConfig().max_workers
    indexed_results: Dict[int, SweepResult] = {}
    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = {
            executor.submit(scan_provider, provider, language_dictionary): index
            for index, provider in enumerate(providers)
        }

        for future in as_completed(futures):
            indexed_results[futures[future]] = future.result()

    return [indexed_results[index] for index in range(len(providers))]


def report_result(result: SweepResult) -> None:
    """
    Log the diagnostics of a result, bracketed by start and stop lines
    :param result: Result to report
    """
    LOGGER.info(f"Started displaying missing languages for {result.service}.")
    if result.error is not None:
        LOGGER.error(f"{result.service} could not be scanned: {result.error}")
    for diagnostic in result.diagnostics:
        LOGGER.info(diagnostic.render())
    LOGGER.info(f"Stopped displaying missing languages for {result.service}.")
