"""
langsync Arg Parser to determine what actions to take
"""

import argparse
import logging
import os
import pathlib
from typing import List, Optional

from .providers import PROVIDERS

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments from user to determine which
    providers to scan and where to put the results.
    :param argv: Arguments to parse (default: sys.argv)
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("langsync")

    parser.add_argument(
        "--use-envvars",
        action="store_true",
        help=(
            "Use environment variables over parser flags for sweep options "
            "(PROVIDERS, SEQUENTIAL, OUTPUT, PRETTY). SEQUENTIAL and PRETTY "
            "are switched on by any non-empty value, including 'false'."
        ),
    )
    parser.add_argument(
        "--providers",
        "-p",
        type=lambda s: s.lower(),
        nargs="*",
        metavar="PROVIDER",
        choices=sorted(PROVIDERS),
        default=[],
        help=f"Provider(s) to scan ({', '.join(PROVIDERS)}). Defaults to all of them.",
    )
    parser.add_argument(
        "--sequential",
        "-s",
        action="store_true",
        help="Scan providers one at a time instead of concurrently.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=pathlib.Path,
        metavar="PATH",
        help="Also write the diagnostics to a JSON report at PATH.",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="When dumping the JSON report, prettify the contents instead of minifying them.",
    )

    parsed_args = parser.parse_args(argv)

    if parsed_args.use_envvars:
        LOGGER.info("Using environment variables over parser flags")
        parsed_args.providers = [
            provider.strip().lower()
            for provider in os.environ.get("PROVIDERS", "").split(",")
            if provider.strip()
        ]
        parsed_args.sequential = bool(os.environ.get("SEQUENTIAL", False))
        output = os.environ.get("OUTPUT")
        parsed_args.output = pathlib.Path(output) if output else None
        parsed_args.pretty = bool(os.environ.get("PRETTY", False))

    unknown = [name for name in parsed_args.providers if name not in PROVIDERS]
    if unknown:
        parser.error(f"Unknown provider(s): {', '.join(unknown)}")

    if not parsed_args.providers:
        parsed_args.providers = list(PROVIDERS)

    return parsed_args
