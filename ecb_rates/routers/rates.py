from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from typing import List

from ecb_rates.models.rates import ExchangeRate
from ecb_rates.services.rates.providers import (
    EcbExchangeRateProvider,
    get_rate_provider,
)

"""Rates router.

Endpoints:
    - GET /rates/live?currency=USD -> every ECB currency per 1 unit of `currency`

Handlers are sync so the blocking feed download runs in the threadpool.
"""

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get(
    "/live",
    summary="Live ECB rates re-based onto a currency",
    response_model=List[ExchangeRate],
)
def live_rates(
    currency: str = Query(
        "EUR", description="Base currency code (e.g. EUR, USD)", max_length=16
    ),
    provider: EcbExchangeRateProvider = Depends(get_rate_provider),
) -> List[ExchangeRate]:
    return provider.get_live_rates(currency)
