"""Locale and time zone catalogs backing the option resolver.

The resolver never talks to Babel or ``zoneinfo`` directly.  It reads entries
from an ``OptionCatalog`` so tests can hand it a fixed set of locales and
zones while Home Assistant uses ``PlatformCatalog``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Iterable, List, Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from babel import Locale
from babel.core import parse_locale
from babel.localedata import locale_identifiers

from .const import DEFAULT_DISPLAY_LOCALE

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocaleEntry:
    """A locale known to the catalog, split into its codes."""

    language: str
    country: str = ""
    variant: str = ""

    def display_language(self, display: Locale) -> str:
        return _display_name(display.languages, self.language)

    def display_country(self, display: Locale) -> str:
        return _display_name(display.territories, self.country)

    def display_variant(self, display: Locale) -> str:
        return _display_name(display.variants, self.variant)


@dataclass(frozen=True)
class TimeZoneEntry:
    """A zone identifier with its standard-time UTC offset in milliseconds."""

    zone_id: str
    raw_offset: int


class OptionCatalog(Protocol):
    """Read-only source of locales and time zones."""

    def list_locales(self) -> Iterable[LocaleEntry]:
        ...

    def list_time_zones(self) -> Iterable[TimeZoneEntry]:
        ...

    def default_locale(self) -> str:
        ...


class PlatformCatalog:
    """Catalog backed by Babel's CLDR data and the IANA zone database."""

    def __init__(self, default_locale: Optional[str] = None) -> None:
        self._default_locale = default_locale or DEFAULT_DISPLAY_LOCALE

    def default_locale(self) -> str:
        return self._default_locale

    def list_locales(self) -> List[LocaleEntry]:
        entries: List[LocaleEntry] = []
        for identifier in locale_identifiers():
            try:
                parts = parse_locale(identifier)
            except ValueError:
                _LOGGER.debug("Skipping unparsable locale identifier %s", identifier)
                continue
            entries.append(
                LocaleEntry(
                    language=parts[0] or "",
                    country=parts[1] or "",
                    variant=parts[3] or "",
                )
            )
        return entries

    def list_time_zones(self, now: Optional[datetime] = None) -> List[TimeZoneEntry]:
        """Return every available zone with its standard offset for the year of ``now``.

        Each zone is sampled on January 1 and July 1 so the result does not
        change with the season in which it is queried.
        """
        year = (now or datetime.now(timezone.utc)).year
        entries: List[TimeZoneEntry] = []
        for zone_id in available_timezones():
            try:
                zone = ZoneInfo(zone_id)
            except (ZoneInfoNotFoundError, ValueError):
                _LOGGER.debug("Skipping unloadable time zone %s", zone_id)
                continue
            entries.append(TimeZoneEntry(zone_id, raw_offset_millis(zone, year)))
        return entries


def raw_offset_millis(zone: tzinfo, year: int) -> int:
    """Return the standard-time UTC offset of ``zone`` in ``year`` in milliseconds.

    Takes whichever of the January 1 and July 1 samples has a zero ``dst()``,
    else the smaller of the two offsets. Europe/Dublin reports +1:00 with the
    default tzdata build, which models Irish winter time as negative DST.
    """
    samples = []
    for month in (1, 7):
        local = datetime(year, month, 1, tzinfo=timezone.utc).astimezone(zone)
        offset = local.utcoffset() or timedelta(0)
        if local.dst() == timedelta(0):
            return int(offset.total_seconds()) * 1000
        samples.append(offset)
    return int(min(samples).total_seconds()) * 1000


def _display_name(names, code: str) -> str:
    # Unknown codes render as themselves.
    if not code:
        return ""
    return names.get(code) or code
