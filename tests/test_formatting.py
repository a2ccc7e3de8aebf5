# SPDX-License-Identifier: Apache-2.0
"""Tests for bytesize.formatting module."""

import logging

import pytest

from bytesize.exceptions import (
    BadBaseError,
    BadByteCountError,
    BadPrecisionError,
    FormatError,
)
from bytesize.formatting import (
    ERROR_PREFIX,
    format_bytes,
    format_bytes_strict,
    is_format_error,
)

INT64_MAX = 9223372036854775807


class TestFormatBytes:
    """Test cases for format_bytes function."""

    @pytest.mark.parametrize(
        "value,base,precision,expected",
        [
            (1000, 10, 0, "1KB"),
            (1024, 10, 2, "1.02KB"),
            (1024, 2, 1, "1.0KiB"),
            (56000, 10, 2, "56.00KB"),         # 1 sec of 56K modem
            (1024000, 2, 2, "1000.00KiB"),     # A "1MB" floppy disk is 1000KiB
            (52428800, 2, 0, "50MiB"),         # A "50MB" file on a CD is 50MiB
            (1300000000, 2, 2, "1.21GiB"),     # A 1.3GB file on a DVD
            (300000000000, 10, 1, "300.0GB"),  # A 300GB hard disk is 300GB
            (8589934592, 2, 2, "8.00GiB"),     # "8GB" of RAM is 8GiB
        ],
    )
    def test_known_values(self, value, base, precision, expected):
        """Test real-world sizes in both unit systems."""
        assert format_bytes(value, base, precision) == expected

    def test_below_smallest_unit(self):
        """Test values below 1KB/1KiB stay in bytes."""
        assert format_bytes(999, 10, 0) == "999B"
        assert format_bytes(999, 2, 0) == "999B"
        assert format_bytes(1023, 2, 0) == "1023B"
        assert format_bytes(1, 10, 2) == "1.00B"

    def test_zero(self):
        """Test zero renders as bytes."""
        assert format_bytes(0, 10, 0) == "0B"
        assert format_bytes(0, 2, 3) == "0.000B"

    def test_boundary_values(self):
        """Test exact unit boundaries switch to the larger unit."""
        assert format_bytes(1000, 10, 0) == "1KB"
        assert format_bytes(1000, 2, 0) == "1000B"
        assert format_bytes(1024, 2, 0) == "1KiB"
        assert format_bytes(1000**2, 10, 0) == "1MB"
        assert format_bytes(1000**2 - 1, 10, 2) == "1000.00KB"
        assert format_bytes(1024**3, 2, 0) == "1GiB"

    def test_int64_max(self):
        """Test the largest signed 64-bit value."""
        assert format_bytes(INT64_MAX, 10, 2) == "9.22EB"
        assert format_bytes(INT64_MAX, 2, 2) == "8.00EiB"

    def test_beyond_int64(self):
        """Test values needing the largest units do not overflow."""
        assert format_bytes(1000**8, 10, 0) == "1YB"
        assert format_bytes(1024**8, 2, 0) == "1YiB"
        assert format_bytes(2000 * 1024**8, 2, 0) == "2000YiB"

    @pytest.mark.parametrize("value", [0, 999, 1024, INT64_MAX])
    def test_unit_selection_keeps_magnitude_in_range(self, value):
        """Test the chosen unit leaves the number in [1, 1000) or [1, 1024)."""
        for base, limit in ((10, 1000), (2, 1024)):
            text = format_bytes(value, base, 6)
            number = float(text.rstrip("KMGTPEZYiB"))
            if text.endswith("B") and text[-2].isdigit():
                assert number == value
            else:
                assert 1 <= number < limit


class TestFormatErrors:
    """Test cases for the in-band error sentinel."""

    @pytest.mark.parametrize("value", [0, 1, 1024, INT64_MAX])
    def test_bad_base(self, value):
        """Test an unsupported base returns the BADBASE sentinel."""
        assert format_bytes(value, 3, 1) == "%!(BADBASE)"
        assert format_bytes(value, 16, 1).startswith(ERROR_PREFIX)

    @pytest.mark.parametrize("value", [0, 1, 1024, INT64_MAX])
    def test_negative_precision(self, value):
        """Test a negative precision returns the BADPREC sentinel."""
        assert format_bytes(value, 10, -1) == "%!(BADPREC)"

    def test_non_integer_precision(self):
        """Test non-integer precisions are rejected."""
        assert format_bytes(1024, 2, 1.5) == "%!(BADPREC)"
        assert format_bytes(1024, 2, "2") == "%!(BADPREC)"
        assert format_bytes(1024, 2, True) == "%!(BADPREC)"

    def test_unrenderable_precision(self):
        """Test a precision too large for the float formatter."""
        assert format_bytes(1024, 2, 2**64) == "%!(BADPREC)"

    def test_non_integer_base(self):
        """Test bool and float bases are rejected."""
        assert format_bytes(1024, 10.0, 2) == "%!(BADBASE)"
        assert format_bytes(1024, True, 2) == "%!(BADBASE)"

    def test_byte_count_too_large_for_float(self):
        """Test an int beyond float range returns the BADVALUE sentinel."""
        assert format_bytes(10**400, 10, 2) == "%!(BADVALUE)"
        assert format_bytes(10**400, 2, 0) == "%!(BADVALUE)"

    def test_base_checked_before_precision(self):
        """Test a bad base wins when both arguments are invalid."""
        assert format_bytes(1024, 3, -1) == "%!(BADBASE)"

    def test_sentinel_is_logged(self, caplog):
        """Test sentinels are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="bytesize"):
            format_bytes(1024, 3, 1)
        assert any("Invalid base" in r.getMessage() for r in caplog.records)

    def test_is_format_error(self):
        """Test sentinel detection."""
        assert is_format_error(format_bytes(1, 3, 0))
        assert is_format_error(format_bytes(1, 10, -2))
        assert not is_format_error(format_bytes(1, 10, 0))


class TestFormatBytesStrict:
    """Test cases for the raising entry point."""

    def test_matches_format_bytes(self):
        """Test valid arguments give the same result as format_bytes."""
        assert format_bytes_strict(1300000000, 2, 2) == "1.21GiB"
        assert format_bytes_strict(1024, 10, 2) == format_bytes(1024, 10, 2)

    def test_bad_base_raises(self):
        """Test BadBaseError carries the base and code."""
        with pytest.raises(BadBaseError) as exc_info:
            format_bytes_strict(1024, 8, 2)
        assert exc_info.value.base == 8
        assert exc_info.value.code == "BADBASE"
        assert isinstance(exc_info.value, FormatError)

    def test_bad_precision_raises(self):
        """Test BadPrecisionError carries the precision and code."""
        with pytest.raises(BadPrecisionError) as exc_info:
            format_bytes_strict(1024, 10, -3)
        assert exc_info.value.precision == -3
        assert exc_info.value.code == "BADPREC"

    def test_unrenderable_precision_chains_cause(self):
        """Test formatter failures are wrapped, not leaked."""
        with pytest.raises(BadPrecisionError) as exc_info:
            format_bytes_strict(1024, 10, 2**64)
        assert exc_info.value.__cause__ is not None
        assert "reason" in exc_info.value.details

    def test_byte_count_too_large_raises(self):
        """Test BadByteCountError wraps the float conversion failure."""
        with pytest.raises(BadByteCountError) as exc_info:
            format_bytes_strict(10**400, 10, 2)
        assert exc_info.value.code == "BADVALUE"
        assert isinstance(exc_info.value.__cause__, OverflowError)
