from __future__ import annotations

"""Lightweight HTTP client util.

Uses stdlib urllib; one GET returning the raw body. No retries: rate providers
degrade instead.
"""
import http.client
import urllib.request
import urllib.error


class HttpError(Exception):
    pass


def get_bytes(url: str, *, timeout: float = 5.0) -> bytes:
    try:
        with urllib.request.urlopen(url, timeout=timeout) as resp:  # nosec B310
            return resp.read()
    except (
        urllib.error.URLError,
        http.client.HTTPException,
        OSError,
    ) as e:  # URLError covers non-2xx; OSError covers timeouts and resets
        raise HttpError(f"Failed to fetch {url}: {e}") from e
