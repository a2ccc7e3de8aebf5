# SPDX-License-Identifier: Apache-2.0
"""
Exception hierarchy for bytesize.

Formatting and parsing fail through separate branches of the hierarchy so
callers can handle them independently.

Usage:
    from bytesize.exceptions import ParseError, RangeOverflowError

    try:
        limit = parse_bytes(text)
    except RangeOverflowError:
        limit = INT64_MAX
    except ParseError as e:
        logger.error(f"Bad size limit: {e}")
"""

from typing import Any, Optional


class ByteSizeError(Exception):
    """
    Base exception for all bytesize errors.

    All custom exceptions in bytesize inherit from this class to allow
    for easy catching of every bytesize-related error.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


# =============================================================================
# Formatting Exceptions
# =============================================================================


class FormatError(ByteSizeError):
    """
    Invalid arguments passed to the formatter.

    Attributes:
        code: Short error code rendered inside the "%!(CODE)" sentinel.
    """

    code = "BADFORMAT"


class BadBaseError(FormatError):
    """Base is neither 10 (SI) nor 2 (IEC)."""

    code = "BADBASE"

    def __init__(
        self,
        base: Any,
        message: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message or f"Invalid base {base!r}, expected 10 or 2", details)
        self.base = base


class BadPrecisionError(FormatError):
    """Precision is negative, not an integer, or too large to render."""

    code = "BADPREC"

    def __init__(
        self,
        precision: Any,
        message: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(
            message or f"Invalid precision {precision!r}, expected a non-negative integer",
            details,
        )
        self.precision = precision


class BadByteCountError(FormatError):
    """Byte count cannot be converted to a float (e.g. an int beyond 1e308)."""

    code = "BADVALUE"

    def __init__(
        self,
        byte_count: Any,
        message: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message or "Byte count too large to format", details)
        self.byte_count = byte_count


# =============================================================================
# Parsing Exceptions
# =============================================================================


class ParseError(ByteSizeError, ValueError):
    """
    A size string could not be converted to a byte count.

    Also a ValueError, so existing ``except ValueError`` handlers around
    size parsing keep working.

    Attributes:
        text: The input that failed to parse.
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message, details)
        self.text = text


class InvalidNumberError(ParseError):
    """The numeric prefix is empty or not a valid number."""

    pass


class MissingUnitError(ParseError):
    """No unit suffix follows the number."""

    pass


class UnrecognizedUnitError(ParseError):
    """
    The unit suffix is not a known SI or IEC byte unit.

    Units are case-sensitive; a lowercase "b" would mean bits and is
    rejected here.
    """

    def __init__(
        self,
        message: str,
        unit: str,
        text: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message, text, details)
        self.unit = unit


class RangeOverflowError(ParseError):
    """The parsed value does not fit in a signed 64-bit integer."""

    def __init__(
        self,
        message: str,
        value: float,
        text: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message, text, details)
        self.value = value


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(ByteSizeError):
    """
    Invalid configuration value.

    Attributes:
        key: The configuration key (or environment variable) that is invalid.
        value: The invalid value.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message, details)
        self.key = key
        self.value = value
