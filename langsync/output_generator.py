"""
langsync report output
"""

import json
import logging
import pathlib
from typing import Any, Dict, List

from . import constants
from .langsync_config import LangsyncConfig
from .sweep import SweepResult

LOGGER = logging.getLogger(__name__)


def build_report(results: List[SweepResult]) -> Dict[str, Any]:
    """
    Build a JSON serializable report of a sweep
    :param results: Results of every provider
    :return Report content
    """
    return {
        "meta": {
            "date": constants.LANGSYNC_BUILD_DATE,
            "version": LangsyncConfig().langsync_version,
        },
        "data": {
            result.service: {
                "diagnostics": [
                    diagnostic.to_json() for diagnostic in result.diagnostics
                ],
                "error": str(result.error) if result.error is not None else None,
            }
            for result in results
        },
    }


def write_report(
    file_path: pathlib.Path, results: List[SweepResult], pretty_print: bool
) -> None:
    """
    Write a sweep report to disk
    :param file_path: Where to write the report
    :param results: Results of every provider
    :param pretty_print: Indent the output instead of minifying it
    """
    file_path = file_path.expanduser()
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8") as file:
        json.dump(
            build_report(results),
            file,
            ensure_ascii=False,
            indent=(4 if pretty_print else None),
        )

    LOGGER.info(f"Wrote report for {len(results)} providers to {file_path}")
