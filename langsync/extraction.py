"""
Byte level helpers for pulling embedded data out of provider pages

Provider pages are UTF-8 HTML/JS while every marker we look for is ASCII,
so all searching happens on the raw bytes without decoding the page.
"""

import json
import logging
from typing import Any, Union

from .errors import ExtractionError, MarkerNotFound

LOGGER = logging.getLogger(__name__)

_QUOTE_TABLE = bytes.maketrans(b"'", b'"')

Buffer = Union[bytes, bytearray]


def find_marker(buffer: Buffer, marker: bytes, start: int = 0) -> int:
    """
    Find the first occurrence of a marker
    :param buffer: Bytes to search
    :param marker: Marker to find
    :param start: Offset to begin the search from
    :return: Absolute offset of the marker within buffer
    """
    offset = buffer.find(marker, start)
    if offset < 0:
        raise MarkerNotFound(marker, start)

    return offset


def slice_between(
    buffer: Buffer, start_marker: bytes, end_marker: bytes, start: int = 0
) -> bytes:
    """
    Get the bytes strictly between two markers
    :param buffer: Bytes to search
    :param start_marker: Marker directly before the wanted content
    :param end_marker: First marker after the wanted content
    :param start: Offset to begin searching for start_marker from
    :return: Content between the markers
    """
    content_start = find_marker(buffer, start_marker, start) + len(start_marker)
    content_end = find_marker(buffer, end_marker, content_start)

    return bytes(buffer[content_start:content_end])


def normalize_quasi_json(buffer: Buffer) -> bytearray:
    """
    Swap every single quote for a double quote so JS object literals
    written with single quotes can go through a JSON parser.
    A bytearray is modified in place; other buffers are copied first.
    :param buffer: Quasi-JSON content
    :return: The normalized buffer
    """
    if not isinstance(buffer, bytearray):
        buffer = bytearray(buffer)

    buffer[:] = buffer.translate(_QUOTE_TABLE)
    return buffer


def parse_json(buffer: Buffer, what: str) -> Any:
    """
    Parse an extracted byte range as JSON
    :param buffer: Extracted content
    :param what: Description of the content, for error messages
    :return: Parsed content
    """
    try:
        return json.loads(bytes(buffer))
    except (UnicodeDecodeError, ValueError) as error:
        LOGGER.debug(f"Unable to parse {what}: {bytes(buffer[:200])!r}")
        raise ExtractionError(f"Unable to parse {what} as JSON: {error}") from error


def read_digit_before(
    buffer: Buffer, marker: bytes, distance: int, start: int = 0
) -> int:
    """
    Locate a marker, then read the single ASCII digit a fixed
    number of bytes in front of it
    :param buffer: Bytes to search
    :param marker: Marker the digit is anchored to
    :param distance: How many bytes before the marker the digit sits
    :param start: Offset to begin searching for marker from
    :return: Value of the digit
    """
    marker_offset = find_marker(buffer, marker, start)
    digit_offset = marker_offset - distance
    if digit_offset < 0:
        raise ExtractionError(
            f"Marker {marker!r} at offset {marker_offset} is too close "
            f"to the start of the payload to read a key {distance} bytes back"
        )

    digit = buffer[digit_offset]
    if not ord("0") <= digit <= ord("9"):
        raise ExtractionError(
            f"Expected a digit {distance} bytes before {marker!r}, "
            f"found {bytes([digit])!r}"
        )

    return digit - ord("0")
