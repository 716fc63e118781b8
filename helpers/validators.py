"""Voluptuous validators for I18n Options."""

from __future__ import annotations

import voluptuous as vol


def locale_tag() -> vol.Schema:
    """Return a schema that normalizes a locale tag to ``ll_CC`` form.

    Only the shape is normalized; whether the locale exists is left to the
    resolver, which falls back to defaults for unknown tags.
    """

    def validate(value: str) -> str:
        if not isinstance(value, str):
            raise vol.Invalid(f"{value!r} is not a locale tag")
        parts = [part for part in value.strip().replace("-", "_").split("_") if part]
        if not parts:
            raise vol.Invalid("Locale tag is empty")
        normalized = [parts[0].lower()]
        for part in parts[1:]:
            if len(part) == 4 and part.isalpha():
                normalized.append(part.title())
            else:
                normalized.append(part.upper())
        return "_".join(normalized)

    return vol.Schema(validate)


def uri_string() -> vol.Schema:
    """Return a schema that coerces a target identifier to a stripped string."""

    def validate(value: str) -> str:
        if value is None:
            raise vol.Invalid("Target identifier is required")
        text = str(value).strip()
        if not text:
            raise vol.Invalid("Target identifier is empty")
        return text

    return vol.Schema(validate)
