"""Locale resource service used by the plugin install/uninstall hooks.

The host platform owns the real resource store; `InMemoryLocalizationService`
backs the standalone service and tests.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Dict, Optional, Protocol


class LocalizationService(Protocol):
    def add_or_update_resource(self, key: str, text: str) -> None: ...

    def delete_resource(self, key: str) -> None: ...

    def get_resource(self, key: str) -> Optional[str]: ...


class InMemoryLocalizationService:
    def __init__(self):
        # Keyed case-insensitively, like the host's resource names
        self._resources: Dict[str, str] = {}

    def add_or_update_resource(self, key: str, text: str) -> None:
        if not key or not key.strip():
            raise ValueError("resource key must not be empty")
        self._resources[key.lower()] = text

    def delete_resource(self, key: str) -> None:
        self._resources.pop(key.lower(), None)

    def get_resource(self, key: str) -> Optional[str]:
        return self._resources.get(key.lower())


@lru_cache
def get_localization_service() -> InMemoryLocalizationService:
    return InMemoryLocalizationService()
