"""Service handlers for I18n Options."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import voluptuous as vol
from homeassistant.core import HomeAssistant, ServiceCall, ServiceResponse, SupportsResponse
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import config_validation as cv

from .const import DOMAIN
from .helpers.validators import locale_tag, uri_string
from .resolver import OptionCatalogResolver

_LOGGER = logging.getLogger(__name__)

SERVICE_GET_PARAMETER_OPTIONS = "get_parameter_options"

SERVICE_GET_PARAMETER_OPTIONS_SCHEMA = vol.Schema({
    vol.Required("target"): uri_string(),
    vol.Required("param"): cv.string,
    vol.Optional("context"): vol.Any(None, cv.string),
    vol.Optional("locale"): vol.Any(None, locale_tag()),
    vol.Optional("display_locale"): vol.Any(None, locale_tag()),
})


async def async_register_services(hass: HomeAssistant) -> None:
    """Register services for the integration."""
    if hass.services.has_service(DOMAIN, SERVICE_GET_PARAMETER_OPTIONS):
        return

    async def handle_get_parameter_options(call: ServiceCall) -> ServiceResponse:
        return await async_get_parameter_options(hass, call.data)

    hass.services.async_register(
        DOMAIN,
        SERVICE_GET_PARAMETER_OPTIONS,
        handle_get_parameter_options,
        schema=SERVICE_GET_PARAMETER_OPTIONS_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )


async def async_unregister_services(hass: HomeAssistant) -> None:
    """Unregister services once no config entry is left."""
    if hass.data.get(DOMAIN):
        return
    if hass.services.has_service(DOMAIN, SERVICE_GET_PARAMETER_OPTIONS):
        hass.services.async_remove(DOMAIN, SERVICE_GET_PARAMETER_OPTIONS)


async def async_get_parameter_options(hass: HomeAssistant, data: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve options for a validated service payload."""
    resolver = _loaded_resolver(hass)
    if resolver is None:
        raise HomeAssistantError("I18n Options is not set up")

    target = data["target"]
    param = data["param"]
    options = await hass.async_add_executor_job(
        resolver.resolve_options,
        target,
        param,
        data.get("context"),
        data.get("locale"),
        data.get("display_locale"),
    )
    if options is None:
        _LOGGER.debug("No parameter options for %s/%s", target, param)
    return {
        "target": target,
        "param": param,
        "options": None if options is None else [option.as_dict() for option in options],
    }


def _loaded_resolver(hass: HomeAssistant) -> Optional[OptionCatalogResolver]:
    for entry_data in hass.data.get(DOMAIN, {}).values():
        resolver = entry_data.get("resolver")
        if resolver is not None:
            return resolver
    return None
