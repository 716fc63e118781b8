"""Config flow for the I18n Options integration."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.core import HomeAssistant
from homeassistant.helpers import selector
from homeassistant.helpers.selector import SelectOptionDict

from .catalog import PlatformCatalog
from .const import (
    CONF_DISPLAY_LOCALE,
    CONF_VERSION,
    DISPLAY_LOCALE_FOLLOW_SYSTEM,
    DOMAIN,
    PARAM_LANGUAGE,
    TARGET_I18N,
)
from .resolver import OptionCatalogResolver

_LOGGER = logging.getLogger(__name__)


class I18nOptionsConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for I18n Options."""

    VERSION = CONF_VERSION

    @staticmethod
    def async_get_options_flow(config_entry: config_entries.ConfigEntry):
        return I18nOptionsOptionsFlow(config_entry)

    async def async_step_user(self, user_input: Optional[Dict[str, Any]] = None):
        """Single step: the integration has nothing to configure up front."""
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()
        if user_input is not None:
            return self.async_create_entry(title="I18n Options", data={})
        return self.async_show_form(step_id="user", data_schema=vol.Schema({}))


class I18nOptionsOptionsFlow(config_entries.OptionsFlow):
    """Options flow selecting the locale used to render labels."""

    def __init__(self, entry: config_entries.ConfigEntry) -> None:
        self._entry = entry
        self._options = dict(entry.options) if entry.options else {}

    async def async_step_init(self, user_input: Optional[Dict[str, Any]] = None):
        if user_input is not None:
            self._options[CONF_DISPLAY_LOCALE] = user_input.get(
                CONF_DISPLAY_LOCALE, DISPLAY_LOCALE_FOLLOW_SYSTEM
            )
            return self.async_create_entry(title="", data=self._options)

        current = self._options.get(CONF_DISPLAY_LOCALE, DISPLAY_LOCALE_FOLLOW_SYSTEM)
        options = await _language_select_options(self.hass)
        schema = vol.Schema({
            vol.Optional(CONF_DISPLAY_LOCALE, default=current): selector.SelectSelector(
                selector.SelectSelectorConfig(
                    options=options,
                    mode=selector.SelectSelectorMode.DROPDOWN,
                )
            ),
        })
        return self.async_show_form(step_id="init", data_schema=schema)


async def _language_select_options(hass: HomeAssistant) -> List[SelectOptionDict]:
    """Build dropdown options for the display locale, labelled in HA's language."""
    resolver = OptionCatalogResolver(PlatformCatalog(hass.config.language))
    languages = await hass.async_add_executor_job(
        resolver.resolve_options, TARGET_I18N, PARAM_LANGUAGE
    )
    options = [SelectOptionDict(value=DISPLAY_LOCALE_FOLLOW_SYSTEM, label="Follow Home Assistant")]
    for option in languages or []:
        options.append(SelectOptionDict(value=option.value, label=f"{option.label} ({option.value})"))
    return options
