from __future__ import annotations

"""Exchange rate provider abstraction."""
from abc import ABC, abstractmethod
from typing import List

from ecb_rates.models.rates import ExchangeRate


class ExchangeRateProvider(ABC):
    reference_currency: str = "EUR"

    @abstractmethod
    def get_live_rates(self, target_currency_code: str) -> List[ExchangeRate]:
        """Return rates for every quoted currency per 1 unit of the target."""
        raise NotImplementedError

    def install(self) -> None:
        """Register the provider's host resources."""

    def uninstall(self) -> None:
        """Remove whatever install() registered."""
