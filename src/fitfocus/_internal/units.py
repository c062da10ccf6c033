"""Unit conversion helpers shared across the codebase."""

from __future__ import annotations

import math

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def mps_to_kmh(mps: float) -> float:
    """Convert metres per second to kilometres per hour."""
    return mps * 3.6


def trunc_signed(value: float) -> int:
    """Truncate toward zero like a signed 32-bit cast (``-3.8`` -> ``-3``).

    NaN becomes ``0``; out-of-range values saturate.
    """
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return math.trunc(value)


def trunc_unsigned(value: float) -> int:
    """Truncate toward zero like an unsigned 32-bit cast.

    ``12.7`` -> ``12``; negative values and NaN become ``0``; values past the
    top of the range saturate.
    """
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return math.trunc(value)
