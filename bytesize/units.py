# SPDX-License-Identifier: Apache-2.0
"""
Unit tables for SI (base 10) and IEC (base 2) byte units.

See http://physics.nist.gov/cuu/Units/prefixes.html
and http://physics.nist.gov/cuu/Units/binary.html
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

from .exceptions import BadBaseError


class Base(IntEnum):
    """Unit system, identified by its number base."""

    SI = 10
    IEC = 2


class Unit(NamedTuple):
    """A unit suffix and the number of bytes it stands for."""

    suffix: str
    multiplier: float


BYTE_SUFFIX = "B"

# SI (base 10) units
KB: float = float(1000)
MB: float = float(1000**2)
GB: float = float(1000**3)
TB: float = float(1000**4)
PB: float = float(1000**5)
EB: float = float(1000**6)
ZB: float = float(1000**7)
YB: float = float(1000**8)

# IEC (base 2) units
KiB: float = float(1 << 10)
MiB: float = float(1 << 20)
GiB: float = float(1 << 30)
TiB: float = float(1 << 40)
PiB: float = float(1 << 50)
EiB: float = float(1 << 60)
ZiB: float = float(1 << 70)
YiB: float = float(1 << 80)

# Ladders, smallest to largest. Bytes are implicit below the first entry.
SI_UNITS: Tuple[Unit, ...] = (
    Unit("KB", KB),
    Unit("MB", MB),
    Unit("GB", GB),
    Unit("TB", TB),
    Unit("PB", PB),
    Unit("EB", EB),
    Unit("ZB", ZB),
    Unit("YB", YB),
)

IEC_UNITS: Tuple[Unit, ...] = (
    Unit("KiB", KiB),
    Unit("MiB", MiB),
    Unit("GiB", GiB),
    Unit("TiB", TiB),
    Unit("PiB", PiB),
    Unit("EiB", EiB),
    Unit("ZiB", ZiB),
    Unit("YiB", YiB),
)

_LADDERS = {
    Base.SI: SI_UNITS,
    Base.IEC: IEC_UNITS,
}

MULTIPLIERS: Mapping[str, float] = MappingProxyType(
    {
        BYTE_SUFFIX: 1.0,
        **{unit.suffix: unit.multiplier for unit in SI_UNITS},
        **{unit.suffix: unit.multiplier for unit in IEC_UNITS},
    }
)


def units_for(base: int) -> Tuple[Unit, ...]:
    """
    Return the unit ladder for a base.

    Args:
        base: 10 for SI units, 2 for IEC units.

    Returns:
        Units ordered from smallest (KB/KiB) to largest (YB/YiB).

    Raises:
        BadBaseError: If base is neither 10 nor 2.
    """
    # bool is an int subclass but never a valid base
    if isinstance(base, bool) or not isinstance(base, int) or base not in _LADDERS:
        raise BadBaseError(base)
    return _LADDERS[Base(base)]


def get_multiplier(suffix: str) -> Optional[float]:
    """Look up a unit suffix (case-sensitive). Returns None if unknown."""
    return MULTIPLIERS.get(suffix)
