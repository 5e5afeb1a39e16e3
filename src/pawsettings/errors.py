"""Exception classes for settings persistence, reconciliation and configuration."""

from __future__ import annotations

from typing import Any


class SettingsError(Exception):
    """Base class for all settings errors."""


class SettingsParseError(SettingsError):
    """Raised when a stored settings record cannot be decoded."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with parse error details.

        Args:
            message: Description of the parse failure
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class InvalidSettingError(SettingsError, ValueError):
    """Raised when a value does not satisfy its field's schema."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        super().__init__(f"Invalid value for {key!r}: {value!r} ({reason})")
        self.key = key
        self.value = value
        self.reason = reason


class ServerNotResolvedError(SettingsError):
    """Raised when an operation needs a server API URL but none is set."""


class ConfigError(SettingsError):
    """Raised when the client configuration file is missing or invalid."""
