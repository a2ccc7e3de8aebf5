# SPDX-License-Identifier: Apache-2.0
"""Render byte counts as human-readable strings."""

import logging

from .exceptions import BadByteCountError, BadPrecisionError, FormatError
from .units import BYTE_SUFFIX, units_for

logger = logging.getLogger(__name__)

# Printf-style marker that starts every in-band formatting error.
ERROR_PREFIX = "%!"


def _check_precision(precision: int) -> None:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise BadPrecisionError(precision)


def format_bytes_strict(byte_count: int, base: int, precision: int) -> str:
    """Format a byte count, raising on invalid arguments.

    Args:
        byte_count: Number of bytes to format.
        base: 10 for SI units (KB, MB, ...), 2 for IEC units (KiB, MiB, ...).
        precision: Number of digits after the decimal point.

    Returns:
        The value in the largest unit that does not exceed it, with no space
        before the suffix (e.g., "1.02KB", "8.00GiB", "999B").

    Raises:
        BadBaseError: If base is neither 10 nor 2.
        BadPrecisionError: If precision is not a non-negative integer the
            float formatter can render.
        BadByteCountError: If byte_count is too large to convert to a float.
    """
    ladder = units_for(base)
    _check_precision(precision)

    try:
        magnitude = float(byte_count)
    except OverflowError as e:
        raise BadByteCountError(byte_count, details={"reason": str(e)}) from e

    suffix = BYTE_SUFFIX
    for unit in reversed(ladder):
        if magnitude >= unit.multiplier:
            magnitude /= unit.multiplier
            suffix = unit.suffix
            break

    try:
        number = f"{magnitude:.{precision}f}"
    except (ValueError, OverflowError) as e:
        raise BadPrecisionError(precision, details={"reason": str(e)}) from e
    return f"{number}{suffix}"


def format_bytes(byte_count: int, base: int, precision: int) -> str:
    """Format a byte count as a human-readable string.

    e.g.
        format_bytes(1024 * 1024, 2, 2) => "1.00MiB"
        format_bytes(2000000000, 10, 2) => "2.00GB"

    Never raises for a bad base, precision or out-of-range byte count.
    Instead returns an error string starting with "%!" followed by an
    error code in parentheses, e.g. "%!(BADBASE)", "%!(BADPREC)" or
    "%!(BADVALUE)".
    """
    try:
        return format_bytes_strict(byte_count, base, precision)
    except FormatError as e:
        logger.debug(f"format_bytes(base={base!r}, precision={precision!r}): {e}")
        return f"{ERROR_PREFIX}({e.code})"


def is_format_error(text: str) -> bool:
    """Check whether a format_bytes result is an error sentinel."""
    return text.startswith(ERROR_PREFIX)
