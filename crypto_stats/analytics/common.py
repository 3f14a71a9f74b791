"""
Decimal helpers for the normalized range metric.
"""
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional


def to_decimal(value: float) -> Decimal:
    """Decimal from a float's shortest repr, so 4.0 -> Decimal("4.0")."""
    return Decimal(repr(float(value)))


def normalized_range(high: float, low: float) -> Optional[Decimal]:
    """(high - low) / low, rounded half-up to the scale of (high - low).

    Returns None when ``low`` is zero: the range is undefined and callers
    decide how to treat it. The scale is at least one fractional digit.
    """
    low_d = to_decimal(low)
    if low_d == 0:
        return None
    with localcontext() as ctx:
        ctx.prec = 60
        spread = to_decimal(high) - low_d
        scale = max(-spread.as_tuple().exponent, 1)
        quotient = spread / low_d
        # quantize needs room for every integer digit plus the scale
        ctx.prec = max(ctx.prec, quotient.adjusted() + scale + 2)
        return quotient.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)
