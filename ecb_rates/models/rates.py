from __future__ import annotations
from datetime import datetime, timezone
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator


class ExchangeRate(BaseModel):
    currency_code: str
    rate: Decimal = Field(..., ge=0)  # re-based rates may round to zero
    updated_on: datetime

    @field_validator("currency_code")
    @classmethod
    def valid_currency(cls, v: str) -> str:
        v = v.strip().upper()
        if len(v) != 3 or not (v.isascii() and v.isalpha()):
            raise ValueError("currency code must be three letters")
        return v

    @field_validator("updated_on")
    @classmethod
    def as_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
