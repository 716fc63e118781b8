"""Helper utilities for I18n Options.

Currently only the voluptuous validators shared by the service schemas.
"""
