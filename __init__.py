"""I18n Options integration for Home Assistant."""

from __future__ import annotations

import logging
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .catalog import PlatformCatalog
from .const import CONF_DISPLAY_LOCALE, DEFAULT_DISPLAY_LOCALE, DOMAIN
from .resolver import OptionCatalogResolver
from .services import async_register_services, async_unregister_services

_LOGGER = logging.getLogger(__name__)


async def async_setup(hass: HomeAssistant, config: dict) -> bool:
    """Set up the I18n Options integration via YAML."""
    if DOMAIN in config:
        _LOGGER.warning(
            "Configuration via YAML is not supported for %s; please use the configuration UI.",
            DOMAIN,
        )
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up I18n Options from a config entry."""
    entry.async_on_unload(entry.add_update_listener(_async_options_updated))
    default_locale = _default_display_locale(hass, entry)
    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = {
        "options": entry.options,
        "resolver": OptionCatalogResolver(PlatformCatalog(default_locale)),
    }

    await async_register_services(hass)
    _LOGGER.info("I18n Options entry %s set up with display locale %s", entry.entry_id, default_locale)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    domain_data = hass.data.get(DOMAIN, {})
    domain_data.pop(entry.entry_id, None)
    if not domain_data:
        hass.data.pop(DOMAIN, None)
    await async_unregister_services(hass)
    return True


def _default_display_locale(hass: HomeAssistant, entry: ConfigEntry) -> str:
    configured = (entry.options or {}).get(CONF_DISPLAY_LOCALE)
    if configured:
        return configured
    return getattr(hass.config, "language", None) or DEFAULT_DISPLAY_LOCALE


async def _async_options_updated(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload entry when options change so the new display locale applies."""
    await hass.config_entries.async_reload(entry.entry_id)
