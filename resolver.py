"""Parameter option resolver for i18n configuration targets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Union

from babel import Locale, UnknownLocaleError

from .catalog import LocaleEntry, OptionCatalog
from .const import (
    DEFAULT_DISPLAY_LOCALE,
    MILLIS_PER_MINUTE,
    NO_OFFSET_FORMAT,
    OFFSET_FORMAT,
    PARAM_LANGUAGE,
    PARAM_REGION,
    PARAM_TIMEZONE,
    PARAM_VARIANT,
    TARGET_I18N,
    TARGET_TIMESTAMP_OFFSET,
)

_LOGGER = logging.getLogger(__name__)

LocaleLike = Union[Locale, str, None]


@dataclass(frozen=True)
class ParameterOption:
    """A selectable value with its human readable label."""

    value: str
    label: str

    def as_dict(self) -> Dict[str, str]:
        return {"value": self.value, "label": self.label}


def format_time_zone_label(zone_id: str, raw_offset: int) -> str:
    """Render ``(GMT+H:MM) zone`` for an offset given in milliseconds."""
    if raw_offset == 0:
        return NO_OFFSET_FORMAT.format(zone=zone_id)
    # Sign follows the offset, so -30 minutes renders as GMT-0:30, not GMT.
    hours, minutes = divmod(abs(raw_offset) // MILLIS_PER_MINUTE, 60)
    return OFFSET_FORMAT.format(
        sign="+" if raw_offset > 0 else "-",
        hours=hours,
        minutes=minutes,
        zone=zone_id,
    )


_LocaleField = Callable[[LocaleEntry, Locale], ParameterOption]

_LOCALE_FIELDS: Dict[str, _LocaleField] = {
    PARAM_LANGUAGE: lambda entry, display: ParameterOption(
        entry.language, entry.display_language(display)
    ),
    PARAM_REGION: lambda entry, display: ParameterOption(
        entry.country, entry.display_country(display)
    ),
    PARAM_VARIANT: lambda entry, display: ParameterOption(
        entry.variant, entry.display_variant(display)
    ),
}


class OptionCatalogResolver:
    """Answer option queries for the i18n and timestamp-offset targets.

    Holds no state besides the catalog; every call re-reads it.
    """

    def __init__(self, catalog: OptionCatalog) -> None:
        self._catalog = catalog
        self._handlers: Dict[Tuple[str, str], Callable[[Locale], List[ParameterOption]]] = {
            (TARGET_I18N, PARAM_TIMEZONE): lambda _display: self.time_zone_options(),
            (TARGET_TIMESTAMP_OFFSET, PARAM_TIMEZONE): lambda _display: self.time_zone_options(),
        }
        for param in _LOCALE_FIELDS:
            self._handlers[(TARGET_I18N, param)] = (
                lambda display, param=param: self.locale_options(param, display)
            )

    def resolve_options(
        self,
        target: str,
        param: str,
        context: Optional[str] = None,
        locale: LocaleLike = None,
        display_locale: LocaleLike = None,
    ) -> Optional[List[ParameterOption]]:
        """Return the options for ``param`` on ``target`` or None if not applicable.

        ``context`` is accepted for parity with the host entry point and has
        no effect on the result.
        """
        handler = self._handlers.get((str(target), param))
        if handler is None:
            _LOGGER.debug("No options for target %s param %s", target, param)
            return None
        return handler(self.effective_display_locale(locale, display_locale))

    def effective_display_locale(
        self, locale: LocaleLike = None, display_locale: LocaleLike = None
    ) -> Locale:
        """Pick the first usable of display locale, caller locale, catalog default."""
        for candidate in (display_locale, locale, self._catalog.default_locale()):
            parsed = _parse_locale(candidate)
            if parsed is not None:
                return parsed
        return Locale.parse(DEFAULT_DISPLAY_LOCALE)

    def locale_options(self, param: str, display: Locale) -> List[ParameterOption]:
        field = _LOCALE_FIELDS[param]
        seen = set()
        options: List[ParameterOption] = []
        for entry in self._catalog.list_locales():
            option = field(entry, display)
            if option in seen:
                continue
            seen.add(option)
            if option.value and option.label:
                options.append(option)
        options.sort(key=lambda option: option.label)
        return options

    def time_zone_options(self) -> List[ParameterOption]:
        zones = sorted(self._catalog.list_time_zones(), key=lambda tz: (tz.raw_offset, tz.zone_id))
        return [ParameterOption(tz.zone_id, format_time_zone_label(tz.zone_id, tz.raw_offset)) for tz in zones]


def _parse_locale(candidate: LocaleLike) -> Optional[Locale]:
    if candidate is None or isinstance(candidate, Locale):
        return candidate
    tag = str(candidate).strip()
    if not tag:
        return None
    try:
        return Locale.parse(tag, sep="-" if "-" in tag else "_")
    except (UnknownLocaleError, ValueError, TypeError):
        _LOGGER.debug("Ignoring unusable display locale %r", candidate)
        return None
