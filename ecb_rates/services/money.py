"""Decimal rounding helpers.

Centralized so every re-based rate uses identical rounding semantics.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_EVEN, localcontext


def quantize(value: Decimal, places: int = 4, rounding: str = ROUND_HALF_EVEN) -> Decimal:
    with localcontext() as ctx:
        # Integer digits plus requested places must fit the working precision
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=rounding)


def rebase(
    rate: Decimal, target_rate: Decimal, places: int = 4, rounding: str = ROUND_HALF_EVEN
) -> Decimal:
    """Return rate / target_rate rounded to `places`, exact for any magnitude."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, rate.adjusted() - target_rate.adjusted() + places + 2)
        return quantize(rate / target_rate, places, rounding)
