from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP
from functools import lru_cache
from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_ROUNDING = {ROUND_HALF_EVEN, ROUND_HALF_UP}


class Settings(BaseSettings):
    """Service settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    ECB_FEED_URL, HTTP_TIMEOUT_SECONDS, RATES_ROUNDING).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "ECB Exchange Rate Provider"
    debug: bool = False
    version: str = "1.0.0"

    # Upstream feed
    ecb_feed_url: AnyHttpUrl = "http://www.ecb.int/stats/eurofxref/eurofxref-daily.xml"
    http_timeout_seconds: float = 5.0

    # Re-basing
    rates_decimal_places: int = 4
    rates_rounding: str = ROUND_HALF_EVEN

    def init_post_load(self) -> None:
        """Validate values pydantic cannot check on its own."""
        if self.http_timeout_seconds <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        if not (0 <= self.rates_decimal_places <= 10):
            raise ValueError("rates_decimal_places must be within 0..10")
        if self.rates_rounding not in ALLOWED_ROUNDING:
            raise ValueError(
                f"Unsupported rates_rounding '{self.rates_rounding}'. Allowed: {sorted(ALLOWED_ROUNDING)}"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
