"""Shared loading helpers for the I18n Options tests."""

from __future__ import annotations

import importlib.util
import pathlib
import sys
import types

import pytest
import voluptuous as vol


ROOT = pathlib.Path(__file__).resolve().parents[1]
PKG = "i18n_testpkg"


def _install_homeassistant_stubs() -> None:
    """Install lightweight Home Assistant stubs into sys.modules."""
    if getattr(sys.modules.get("homeassistant"), "_i18n_stub", False):
        return
    ha = types.ModuleType("homeassistant")
    ha._i18n_stub = True
    core = types.ModuleType("homeassistant.core")
    config_entries = types.ModuleType("homeassistant.config_entries")
    exceptions = types.ModuleType("homeassistant.exceptions")
    helpers = types.ModuleType("homeassistant.helpers")
    config_validation = types.ModuleType("homeassistant.helpers.config_validation")
    selector = types.ModuleType("homeassistant.helpers.selector")

    class HomeAssistant:
        pass

    class ServiceCall:
        pass

    class SupportsResponse:
        NONE = "none"
        OPTIONAL = "optional"
        ONLY = "only"

    class HomeAssistantError(Exception):
        pass

    class ConfigEntry:
        pass

    class _FlowBase:
        hass = None

        def async_show_form(self, step_id, data_schema=None, **kwargs):
            return {"type": "form", "step_id": step_id, "data_schema": data_schema}

        def async_create_entry(self, title, data):
            return {"type": "create_entry", "title": title, "data": data}

    class ConfigFlow(_FlowBase):
        def __init_subclass__(cls, domain=None, **kwargs):
            super().__init_subclass__(**kwargs)
            cls.domain = domain

        async def async_set_unique_id(self, unique_id):
            self.unique_id = unique_id

        def _abort_if_unique_id_configured(self):
            return None

    class OptionsFlow(_FlowBase):
        pass

    def string(value):
        if value is None:
            raise vol.Invalid("string value is None")
        return str(value)

    class SelectSelectorMode:
        DROPDOWN = "dropdown"
        LIST = "list"

    class SelectSelectorConfig(dict):
        def __init__(self, **kwargs):
            super().__init__(**kwargs)

    class SelectSelector:
        def __init__(self, config):
            self.config = config

        def __call__(self, value):
            return value

    core.HomeAssistant = HomeAssistant
    core.ServiceCall = ServiceCall
    core.ServiceResponse = dict
    core.SupportsResponse = SupportsResponse
    exceptions.HomeAssistantError = HomeAssistantError
    config_entries.ConfigEntry = ConfigEntry
    config_entries.ConfigFlow = ConfigFlow
    config_entries.OptionsFlow = OptionsFlow
    config_validation.string = string
    selector.SelectSelector = SelectSelector
    selector.SelectSelectorConfig = SelectSelectorConfig
    selector.SelectSelectorMode = SelectSelectorMode
    selector.SelectOptionDict = dict

    ha.core = core
    ha.config_entries = config_entries
    ha.exceptions = exceptions
    ha.helpers = helpers
    helpers.config_validation = config_validation
    helpers.selector = selector

    sys.modules["homeassistant"] = ha
    sys.modules["homeassistant.core"] = core
    sys.modules["homeassistant.config_entries"] = config_entries
    sys.modules["homeassistant.exceptions"] = exceptions
    sys.modules["homeassistant.helpers"] = helpers
    sys.modules["homeassistant.helpers.config_validation"] = config_validation
    sys.modules["homeassistant.helpers.selector"] = selector


def _install_package_scaffold() -> None:
    """Create importable package namespace used for file-based module loading."""
    if PKG in sys.modules:
        return
    pkg = types.ModuleType(PKG)
    pkg.__path__ = [str(ROOT)]
    sys.modules[PKG] = pkg

    helpers = types.ModuleType(f"{PKG}.helpers")
    helpers.__path__ = [str(ROOT / "helpers")]
    sys.modules[f"{PKG}.helpers"] = helpers


def load_module(name: str):
    """Load ``name`` (dotted, relative to the integration root) from its file."""
    full_name = f"{PKG}.{name}"
    if full_name in sys.modules:
        return sys.modules[full_name]
    _install_package_scaffold()
    path = ROOT.joinpath(*name.split(".")).with_suffix(".py")
    spec = importlib.util.spec_from_file_location(full_name, str(path))
    module = importlib.util.module_from_spec(spec)
    assert spec and spec.loader
    sys.modules[full_name] = module
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def const_mod():
    return load_module("const")


@pytest.fixture
def catalog_mod(const_mod):
    return load_module("catalog")


@pytest.fixture
def resolver_mod(catalog_mod):
    return load_module("resolver")


@pytest.fixture
def validators_mod():
    return load_module("helpers.validators")


@pytest.fixture
def ha_stubs():
    _install_homeassistant_stubs()
    return sys.modules["homeassistant"]


@pytest.fixture
def services_mod(ha_stubs, resolver_mod, validators_mod):
    return load_module("services")


@pytest.fixture
def integration_mod(services_mod):
    return load_module("__init__")


@pytest.fixture
def config_flow_mod(ha_stubs, resolver_mod):
    return load_module("config_flow")
