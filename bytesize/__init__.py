# SPDX-License-Identifier: Apache-2.0
"""
bytesize - format and parse quantities of data as human-readable values
such as 1MB or 2.2GiB.

Both SI (base 10: KB, MB, ...) and IEC (base 2: KiB, MiB, ...) units are
supported.

    >>> format_bytes(1024 * 1024, 2, 2)
    '1.00MiB'
    >>> parse_bytes("1.5GiB")
    1610612736
"""

from bytesize._version import __version__

from .config import FormatConfig
from .exceptions import (
    BadByteCountError,
    BadBaseError,
    BadPrecisionError,
    ByteSizeError,
    ConfigurationError,
    FormatError,
    InvalidNumberError,
    MissingUnitError,
    ParseError,
    RangeOverflowError,
    UnrecognizedUnitError,
)
from .formatting import ERROR_PREFIX, format_bytes, format_bytes_strict, is_format_error
from .models import ByteCount, FormatOptions
from .parsing import INT64_MAX, parse_bytes, parse_bytes_float, split
from .units import (
    EB,
    GB,
    IEC_UNITS,
    KB,
    MB,
    MULTIPLIERS,
    PB,
    SI_UNITS,
    TB,
    YB,
    ZB,
    Base,
    EiB,
    GiB,
    KiB,
    MiB,
    PiB,
    TiB,
    Unit,
    YiB,
    ZiB,
    get_multiplier,
    units_for,
)

__all__ = [
    # Formatting
    "format_bytes",
    "format_bytes_strict",
    "is_format_error",
    "ERROR_PREFIX",
    # Parsing
    "parse_bytes",
    "parse_bytes_float",
    "split",
    "INT64_MAX",
    # Units
    "Base",
    "Unit",
    "SI_UNITS",
    "IEC_UNITS",
    "MULTIPLIERS",
    "units_for",
    "get_multiplier",
    "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB",
    "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB",
    # Exceptions
    "ByteSizeError",
    "FormatError",
    "BadBaseError",
    "BadPrecisionError",
    "BadByteCountError",
    "ParseError",
    "InvalidNumberError",
    "MissingUnitError",
    "UnrecognizedUnitError",
    "RangeOverflowError",
    "ConfigurationError",
    # Configuration and validation
    "FormatConfig",
    "FormatOptions",
    "ByteCount",
]
