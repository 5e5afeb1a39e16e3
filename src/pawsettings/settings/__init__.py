"""Settings record, default tables and the reconciliation service.

This package provides:
- AppSettings: the validated settings schema
- AppSettingsService: load/merge/resolve/persist cycle and accessors
- Error classes raised by the accessors
"""

from pawsettings.errors import (
    ConfigError,
    InvalidSettingError,
    ServerNotResolvedError,
    SettingsError,
    SettingsParseError,
)
from pawsettings.settings.model import INITIAL_DEFAULTS, RESET_DEFAULTS, AppSettings
from pawsettings.settings.service import AppSettingsService

__all__ = [
    "AppSettings",
    "AppSettingsService",
    "ConfigError",
    "INITIAL_DEFAULTS",
    "InvalidSettingError",
    "RESET_DEFAULTS",
    "ServerNotResolvedError",
    "SettingsError",
    "SettingsParseError",
]
