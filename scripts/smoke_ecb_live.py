import json
import sys
from fastapi.testclient import TestClient
from ecb_rates.main import create_app
from ecb_rates.core.config import Settings

"""Smoke check against the real ECB feed.

Prints EUR rates and the same snapshot re-based onto the currency given on the
command line (default USD). With no network the EUR list degrades to a single
entry and the re-based call reports unsupported_currency.
"""


def run(currency: str = "USD"):
    client = TestClient(create_app(settings_override=Settings(debug=True)))
    r_eur = client.get("/rates/live", params={"currency": "EUR"})
    r_target = client.get("/rates/live", params={"currency": currency})
    print(
        json.dumps(
            {
                "eur": r_eur.json(),
                currency.lower(): {"status": r_target.status_code, "body": r_target.json()},
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    run(*sys.argv[1:2])
