# SPDX-License-Identifier: Apache-2.0
"""
Parse human-readable sizes such as "1.5GiB" or "300 MB" into byte counts.

Whitespace is allowed between the number and the units. The 'B' for bytes
is required to be upper case; a lowercase 'b' would be bits and is rejected.
"""

import logging
import math
from typing import Tuple

from .exceptions import (
    InvalidNumberError,
    MissingUnitError,
    RangeOverflowError,
    UnrecognizedUnitError,
)
from .units import get_multiplier

logger = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1


def split(text: str) -> Tuple[str, str]:
    """
    Split a size string into its numeric prefix and unit suffix.

    Digits and '.' belong to the number only while no unit character has
    been seen; everything after the first other character is unit. Spaces
    are dropped wherever they occur.

    Args:
        text: Size string like "10MB" or "5 GiB".

    Returns:
        Tuple of (numeric_part, unit_part), e.g. ("5", "GiB").
    """
    number = []
    unit = []
    for ch in text:
        if (ch.isdecimal() or ch == ".") and not unit:
            number.append(ch)
        elif ch != " ":
            unit.append(ch)
    return "".join(number), "".join(unit)


def parse_bytes_float(text: str) -> float:
    """
    Parse a human-readable quantity of bytes.

    Args:
        text: Size string like "1KB", "1.5GiB" or "6 GiB".

    Returns:
        Number of bytes as a float.

    Raises:
        InvalidNumberError: If the numeric prefix is missing or malformed.
        MissingUnitError: If no unit follows the number.
        UnrecognizedUnitError: If the unit is not a known byte unit.
    """
    if not isinstance(text, str):
        raise InvalidNumberError(
            f"Expected a size string, got {type(text).__name__}", text=None
        )

    number, unit = split(text)
    try:
        coefficient = float(number)
    except ValueError as e:
        logger.debug(f"Invalid number {number!r} in size {text!r}")
        raise InvalidNumberError(f"Invalid number in size string: {text!r}", text=text) from e
    if math.isinf(coefficient):
        raise InvalidNumberError(f"Number out of range in size string: {text!r}", text=text)

    if not unit:
        raise MissingUnitError(f"No units found in size string: {text!r}", text=text)

    multiplier = get_multiplier(unit)
    if multiplier is None:
        logger.debug(f"Unrecognized unit {unit!r} in size {text!r}")
        raise UnrecognizedUnitError(f"Unrecognized units {unit}", unit=unit, text=text)

    return coefficient * multiplier


def parse_bytes(text: str) -> int:
    """
    Parse a human-readable quantity of bytes into an integer byte count.

    Fractional bytes are truncated, not rounded.

    Raises:
        RangeOverflowError: If the value is too large for a signed 64-bit
            integer.
        ParseError: Any error raised by parse_bytes_float.
    """
    value = parse_bytes_float(text)
    if value > INT64_MAX:
        raise RangeOverflowError(
            f"Value too large for int64: {text!r}", value=value, text=text
        )
    return int(value)
