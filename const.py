"""Constants for the I18n Options integration."""

from __future__ import annotations

DOMAIN: str = "i18n_options"

# Version of the config entry data schema. Increment when migrating structure.
CONF_VERSION: int = 1

# Configuration targets answered by the resolver
TARGET_I18N = "system:i18n"
TARGET_TIMESTAMP_OFFSET = "profile:system:timestamp-offset"

# Parameter names
PARAM_LANGUAGE = "language"
PARAM_REGION = "region"
PARAM_VARIANT = "variant"
PARAM_TIMEZONE = "timezone"

# Time zone label formats
NO_OFFSET_FORMAT = "(GMT) {zone}"
OFFSET_FORMAT = "(GMT{sign}{hours}:{minutes:02d}) {zone}"

MILLIS_PER_MINUTE = 60_000

# Options
CONF_DISPLAY_LOCALE = "display_locale"
DISPLAY_LOCALE_FOLLOW_SYSTEM = ""
DEFAULT_DISPLAY_LOCALE = "en"
