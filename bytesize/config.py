# SPDX-License-Identifier: Apache-2.0
"""
Default formatting options for bytesize.

This module provides:
- Default base and precision for callers that format many values
- Environment variable support (BYTESIZE_ prefix)
- Validation with readable error messages
"""

import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from .exceptions import ConfigurationError
from .formatting import format_bytes
from .logging_config import configure_logging
from .units import Base

VALID_LOG_LEVELS = ("trace", "debug", "info", "warning", "error", "critical")


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}", key=name, value=raw
        )


@dataclass
class FormatConfig:
    """Formatting defaults."""

    base: int = Base.SI.value
    precision: int = 2
    log_level: str = "warning"

    @classmethod
    def from_env(cls) -> "FormatConfig":
        """
        Create config from environment variables.

        Reads BYTESIZE_BASE, BYTESIZE_PRECISION and BYTESIZE_LOG_LEVEL.
        Unset variables keep their defaults.

        Raises:
            ConfigurationError: If a numeric variable is not an integer.
        """
        config = cls()
        config.base = _int_from_env("BYTESIZE_BASE", config.base)
        config.precision = _int_from_env("BYTESIZE_PRECISION", config.precision)
        config.log_level = os.getenv("BYTESIZE_LOG_LEVEL", config.log_level).lower()
        return config

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []

        if self.base not in (Base.SI, Base.IEC):
            errors.append(f"base must be 10 or 2: {self.base}")
        if self.precision < 0:
            errors.append(f"precision must be non-negative: {self.precision}")
        if self.log_level.lower() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors

    def apply_logging(self) -> None:
        """Configure the bytesize logger at the configured level."""
        configure_logging(self.log_level)

    def format(self, byte_count: int) -> str:
        """Format a byte count with the configured base and precision."""
        return format_bytes(byte_count, self.base, self.precision)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)
