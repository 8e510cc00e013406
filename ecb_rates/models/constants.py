"""Feed and plugin constants."""

from typing import Dict

REFERENCE_CURRENCY = "EUR"

# ECB daily reference rates document
FEED_NAMESPACES: Dict[str, str] = {
    "gesmes": "http://www.gesmes.org/xml/2002-08-01",
    "ns": "http://www.ecb.int/vocabulary/2002-08-01/eurofxref",
}
DAILY_CUBE_PATH = "ns:Cube/ns:Cube"
FEED_DATE_FORMAT = "%Y-%m-%d"

# Plugin descriptor
PLUGIN_SYSTEM_NAME = "ExchangeRate.EcbExchange"
PLUGIN_FRIENDLY_NAME = "ECB exchange rate provider"
PLUGIN_VERSION = "1.0"

# Locale resources registered on install
ERROR_RESOURCE_KEY = "Plugins.ExchangeRate.EcbExchange.Error"
ERROR_RESOURCE_TEXT = (
    "You can use ECB (European central bank) exchange rate provider only "
    "when the primary exchange rate currency is supported by ECB"
)
