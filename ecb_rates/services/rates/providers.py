from __future__ import annotations

"""European Central Bank exchange rate provider.

One GET of the ECB daily feed per call, no caching. Rates arrive as units per
1 EUR; for any other target they are re-based by dividing through the target's
EUR rate and rounded (settings.rates_decimal_places / rates_rounding).

Transport and document failures are logged and degrade the result to the EUR
entry alone. The only error a caller sees for a valid code is
UnsupportedCurrency, raised when the feed does not quote the target.
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, List, Optional

from fastapi import Request

from ecb_rates.core.config import Settings, get_settings
from ecb_rates.core.errors import InvalidArgument, UnsupportedCurrency
from ecb_rates.models.constants import (
    ERROR_RESOURCE_KEY,
    ERROR_RESOURCE_TEXT,
    REFERENCE_CURRENCY,
)
from ecb_rates.models.rates import ExchangeRate
from ecb_rates.services.http_client import HttpError, get_bytes
from ecb_rates.services.localization import (
    LocalizationService,
    get_localization_service,
)
from ecb_rates.services.money import rebase
from .base import ExchangeRateProvider
from .feed import FeedFormatError, parse_daily_feed

Fetcher = Callable[..., bytes]


class EcbExchangeRateProvider(ExchangeRateProvider):
    reference_currency = REFERENCE_CURRENCY

    def __init__(
        self,
        localization: LocalizationService,
        settings: Optional[Settings] = None,
        fetch: Optional[Fetcher] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._settings = settings or get_settings()
        self._localization = localization
        self._fetch = fetch or get_bytes
        self._logger = logger or logging.getLogger("ecb_rates.rates")

    # Internal --------------------------------------------------
    def _reference_rate(self, updated_on: datetime) -> ExchangeRate:
        return ExchangeRate(
            currency_code=self.reference_currency, rate=Decimal(1), updated_on=updated_on
        )

    def _load_rates_to_euro(self) -> List[ExchangeRate]:
        now = datetime.now(timezone.utc)
        url = str(self._settings.ecb_feed_url)
        try:
            body = self._fetch(url, timeout=self._settings.http_timeout_seconds)
            snapshot = parse_daily_feed(body)
        except (HttpError, FeedFormatError) as e:
            self._logger.error(
                "ECB exchange rate provider: %s", e, extra={"feed_url": url}
            )
            return [self._reference_rate(now)]

        updated_on = snapshot.published_on or now
        rates = [self._reference_rate(updated_on)]
        rates.extend(
            ExchangeRate(currency_code=code, rate=rate, updated_on=updated_on)
            for code, rate in snapshot.rates
        )
        self._logger.debug(
            "fetched %d ECB rates", len(rates), extra={"published_on": updated_on}
        )
        return rates

    def _unsupported_message(self) -> str:
        return self._localization.get_resource(ERROR_RESOURCE_KEY) or ERROR_RESOURCE_TEXT

    # Public API -----------------------------------------------
    def get_live_rates(self, target_currency_code: str) -> List[ExchangeRate]:  # type: ignore[override]
        if target_currency_code is None or not target_currency_code.strip():
            raise InvalidArgument("target_currency_code is required")
        target = target_currency_code.strip().upper()

        rates_to_euro = self._load_rates_to_euro()
        if target == self.reference_currency:
            return rates_to_euro

        # Only currencies quoted by the ECB can be used as a base
        target_rate = next(
            (r for r in rates_to_euro if r.currency_code == target), None
        )
        if target_rate is None:
            raise UnsupportedCurrency(target, self._unsupported_message())

        places = self._settings.rates_decimal_places
        rounding = self._settings.rates_rounding
        return [
            ExchangeRate(
                currency_code=r.currency_code,
                rate=rebase(r.rate, target_rate.rate, places, rounding),
                updated_on=r.updated_on,
            )
            for r in rates_to_euro
        ]

    # Plugin lifecycle -----------------------------------------
    @property
    def installed(self) -> bool:
        return self._localization.get_resource(ERROR_RESOURCE_KEY) is not None

    def install(self) -> None:
        self._localization.add_or_update_resource(ERROR_RESOURCE_KEY, ERROR_RESOURCE_TEXT)
        self._logger.info("ECB exchange rate provider installed")

    def uninstall(self) -> None:
        self._localization.delete_resource(ERROR_RESOURCE_KEY)
        self._logger.info("ECB exchange rate provider uninstalled")


# Dependency helper used by FastAPI DI; settings come from the app factory
def get_rate_provider(request: Request) -> EcbExchangeRateProvider:
    settings = getattr(request.app.state, "settings", None)
    return EcbExchangeRateProvider(get_localization_service(), settings=settings)
