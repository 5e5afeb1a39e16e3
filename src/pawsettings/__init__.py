"""Persisted client settings for the Paw wallet.

This package provides:
- AppSettingsService: loads, reconciles and persists the settings record
- AppSettings: the settings schema and its default tables
- SERVER_OPTIONS: the static catalog of node endpoints
"""

from pawsettings.servers.catalog import KNOWN_API_ENDPOINTS, SERVER_OPTIONS, ServerOption
from pawsettings.settings.model import INITIAL_DEFAULTS, RESET_DEFAULTS, AppSettings
from pawsettings.settings.service import AppSettingsService

__all__ = [
    "AppSettings",
    "AppSettingsService",
    "INITIAL_DEFAULTS",
    "KNOWN_API_ENDPOINTS",
    "RESET_DEFAULTS",
    "SERVER_OPTIONS",
    "ServerOption",
]
