# SPDX-License-Identifier: Apache-2.0
"""Pydantic types for accepting byte sizes and format options."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, StrictInt, field_validator

from .formatting import format_bytes_strict
from .parsing import parse_bytes
from .units import Base


def _coerce_byte_count(value: Any) -> Any:
    # ParseError is a ValueError, so pydantic reports it as a validation error
    if isinstance(value, str):
        return parse_bytes(value)
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        raise ValueError(f"Byte count must be non-negative, got {value}")
    return value


# A byte count given either as an int or as a size string like "512MiB".
ByteCount = Annotated[int, BeforeValidator(_coerce_byte_count)]


class FormatOptions(BaseModel):
    """Validated base and precision for format_bytes."""

    base: StrictInt = Base.SI.value
    precision: StrictInt = 2

    @field_validator("base")
    @classmethod
    def validate_base(cls, v: int) -> int:
        if v not in (Base.SI, Base.IEC):
            raise ValueError(f"Invalid base {v}. Must be 10 or 2")
        return v

    @field_validator("precision")
    @classmethod
    def validate_precision(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Invalid precision {v}. Must be non-negative")
        return v

    def render(self, byte_count: int) -> str:
        """Format a byte count with these options."""
        return format_bytes_strict(byte_count, self.base, self.precision)
