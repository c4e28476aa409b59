"""
langsync Main Executor
"""

import argparse
import logging
import sys
import traceback
from typing import List

from langsync import constants
from langsync.utils import init_logger

init_logger()
LOGGER: logging.Logger = logging.getLogger(__name__)


def dispatcher(args: argparse.Namespace) -> bool:
    """
    langsync Dispatcher
    :param args: Parsed arguments
    :return If every provider was scanned
    """
    from langsync.language_dictionary import default_language_dictionary
    from langsync.output_generator import write_report
    from langsync.providers import PROVIDERS, AbstractLanguageProvider
    from langsync.sweep import report_result, run_sweep

    language_dictionary = default_language_dictionary()
    providers: List[AbstractLanguageProvider] = [
        PROVIDERS[name](language_dictionary=language_dictionary)
        for name in args.providers
    ]

    LOGGER.info(
        f"Scanning {len(providers)} providers: "
        f"{', '.join(provider.service_id().display_name for provider in providers)}"
    )
    results = run_sweep(providers, language_dictionary, parallel=not args.sequential)

    for result in results:
        report_result(result)

    if args.output:
        write_report(args.output, results, args.pretty)

    return all(result.succeeded for result in results)


def main() -> None:
    """
    langsync safe main call
    """
    from langsync.arg_parser import parse_args
    from langsync.langsync_config import LangsyncConfig

    args = parse_args()
    LOGGER.info(
        f"Starting langsync {LangsyncConfig().langsync_version} on {constants.LANGSYNC_BUILD_DATE}"
    )

    try:
        all_succeeded = dispatcher(args)
    except Exception as error:
        LOGGER.fatal(f"Exception caught: {error} {traceback.format_exc()}")
        sys.exit(2)

    if not all_succeeded:
        sys.exit(1)


if __name__ == "__main__":
    main()
