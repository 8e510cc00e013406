from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from ecb_rates.core.config import Settings
from ecb_rates.main import create_app
from ecb_rates.services.http_client import HttpError
from ecb_rates.services.localization import InMemoryLocalizationService
from ecb_rates.services.rates.providers import (
    EcbExchangeRateProvider,
    get_rate_provider,
)

FEED_URL = "http://feed.test/stats/eurofxref/eurofxref-daily.xml"


def make_feed(entries, time: Optional[str] = "2024-05-17") -> bytes:
    time_attr = f' time="{time}"' if time is not None else ""
    cubes = "\n".join(
        f"\t\t\t<Cube currency='{code}' rate='{rate}'/>" for code, rate in entries
    )
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
\t<gesmes:subject>Reference rates</gesmes:subject>
\t<gesmes:Sender>
\t\t<gesmes:name>European Central Bank</gesmes:name>
\t</gesmes:Sender>
\t<Cube>
\t\t<Cube{time_attr}>
{cubes}
\t\t</Cube>
\t</Cube>
</gesmes:Envelope>
""".encode("utf-8")


SAMPLE_FEED = make_feed([("USD", "1.1"), ("GBP", "0.85")])


class FakeFetcher:
    """Stands in for http_client.get_bytes."""

    def __init__(self, body: bytes = SAMPLE_FEED, error: Optional[Exception] = None):
        self.body = body
        self.error = error
        self.calls: List[dict] = []

    def __call__(self, url: str, *, timeout: float) -> bytes:
        self.calls.append({"url": url, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def settings() -> Settings:
    return Settings(ecb_feed_url=FEED_URL, http_timeout_seconds=3.0)


@pytest.fixture
def localization() -> InMemoryLocalizationService:
    return InMemoryLocalizationService()


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def failing_fetcher() -> FakeFetcher:
    return FakeFetcher(error=HttpError("Failed to fetch: connection reset"))


@pytest.fixture
def provider(settings, localization, fetcher) -> EcbExchangeRateProvider:
    return EcbExchangeRateProvider(localization, settings=settings, fetch=fetcher)


@pytest.fixture
def client(settings, provider):
    app = create_app(settings_override=settings)
    app.dependency_overrides[get_rate_provider] = lambda: provider
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
