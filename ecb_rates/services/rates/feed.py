from __future__ import annotations

"""ECB daily reference-rate feed parsing.

Document layout (namespaces abbreviated)::

    <gesmes:Envelope>
      <Cube>
        <Cube time="2024-05-17">
          <Cube currency="USD" rate="1.0866"/>
          ...

Rates are units of currency per 1 EUR. Entries whose code or rate cannot be
read are filtered out; the rest of the snapshot is kept.
"""
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Tuple

from ecb_rates.models.constants import (
    DAILY_CUBE_PATH,
    FEED_DATE_FORMAT,
    FEED_NAMESPACES,
    REFERENCE_CURRENCY,
)

# Plain decimal notation only: no exponents, underscores or NaN/Infinity
_RATE_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


class FeedFormatError(Exception):
    """The body is not an ECB daily feed."""


@dataclass(frozen=True)
class FeedSnapshot:
    published_on: Optional[datetime]
    rates: List[Tuple[str, Decimal]] = field(default_factory=list)


def parse_feed_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.strptime(value.strip(), FEED_DATE_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=timezone.utc)


def parse_rate(value: Optional[str]) -> Optional[Decimal]:
    if value is None:
        return None
    value = value.strip()
    if not _RATE_PATTERN.fullmatch(value):
        return None
    rate = Decimal(value)
    if rate <= 0:
        return None
    return rate


def _valid_code(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    code = value.strip().upper()
    if len(code) != 3 or not (code.isascii() and code.isalpha()):
        return None
    return code


def _read_entries(cube: ET.Element) -> List[Tuple[str, Decimal]]:
    entries: List[Tuple[str, Decimal]] = []
    seen = {REFERENCE_CURRENCY}
    for child in cube.findall("ns:Cube", FEED_NAMESPACES):
        code = _valid_code(child.get("currency"))
        rate = parse_rate(child.get("rate"))
        if code is None or rate is None or code in seen:
            continue
        seen.add(code)
        entries.append((code, rate))
    return entries


def parse_daily_feed(body: bytes | str) -> FeedSnapshot:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise FeedFormatError(f"feed is not well-formed XML: {e}") from e

    if root.tag != "{%s}Envelope" % FEED_NAMESPACES["gesmes"]:
        raise FeedFormatError(f"unexpected root element {root.tag}")
    cube = root.find(DAILY_CUBE_PATH, FEED_NAMESPACES)
    if cube is None:
        raise FeedFormatError("daily Cube element not found")

    return FeedSnapshot(
        published_on=parse_feed_date(cube.get("time")),
        rates=_read_entries(cube),
    )
