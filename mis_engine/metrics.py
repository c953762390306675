"""Rounding and percentage helpers used by the KPI formulas."""

from __future__ import annotations

import math

# Absorbs binary representation error such as 1.005 * 100 == 100.49999999999999.
_ROUNDING_EPSILON = 1e-9


def round_half_away(value: float, places: int = 0) -> float:
    """Round half away from zero to ``places`` decimals."""

    factor = 10**places
    scaled = math.floor(abs(value) * factor + 0.5 + _ROUNDING_EPSILON) / factor
    if scaled == 0:
        return 0.0
    return math.copysign(scaled, value)


def round2(value: float) -> float:
    return round_half_away(value, 2)


def deviation_pct(met: int, base: int) -> float:
    """Signed deviation from a 100% target; 0 when there is nothing to measure."""

    if base == 0:
        return 0.0
    return round2((met / base) * 100.0 - 100.0)


def rate_pct(met: float, base: float) -> int:
    """Whole-number percentage of ``met`` over ``base``; 0 when base is 0."""

    if base == 0:
        return 0
    return int(round_half_away((met / base) * 100.0))
