from __future__ import annotations

from fastapi import APIRouter, Depends
from typing import Dict

from ecb_rates.models.constants import (
    PLUGIN_FRIENDLY_NAME,
    PLUGIN_SYSTEM_NAME,
    PLUGIN_VERSION,
)
from ecb_rates.services.rates.providers import (
    EcbExchangeRateProvider,
    get_rate_provider,
)

"""Plugin lifecycle router used by the host's plugin manager.

    - GET  /plugin            -> descriptor + installed flag
    - POST /plugin/install    -> register locale resources
    - POST /plugin/uninstall  -> remove them

Both actions are idempotent.
"""

router = APIRouter(prefix="/plugin", tags=["plugin"])


def _descriptor(provider: EcbExchangeRateProvider) -> Dict[str, str | bool]:
    return {
        "system_name": PLUGIN_SYSTEM_NAME,
        "friendly_name": PLUGIN_FRIENDLY_NAME,
        "version": PLUGIN_VERSION,
        "installed": provider.installed,
    }


@router.get("", summary="Plugin descriptor")
def describe(provider: EcbExchangeRateProvider = Depends(get_rate_provider)):
    return _descriptor(provider)


@router.post("/install", summary="Install the plugin")
def install(provider: EcbExchangeRateProvider = Depends(get_rate_provider)):
    provider.install()
    return {"status": "installed", "plugin": _descriptor(provider)}


@router.post("/uninstall", summary="Uninstall the plugin")
def uninstall(provider: EcbExchangeRateProvider = Depends(get_rate_provider)):
    provider.uninstall()
    return {"status": "uninstalled", "plugin": _descriptor(provider)}
