"""Pydantic domain models for the ECB exchange rate provider."""

from .constants import (
    REFERENCE_CURRENCY,
    ERROR_RESOURCE_KEY,
    ERROR_RESOURCE_TEXT,
)  # re-export
from .rates import ExchangeRate

__all__ = [
    "REFERENCE_CURRENCY",
    "ERROR_RESOURCE_KEY",
    "ERROR_RESOURCE_TEXT",
    "ExchangeRate",
]
