"""Decode a stored settings blob and merge it onto a record field by field."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Final

from pydantic import ValidationError

from pawsettings.errors import InvalidSettingError, SettingsParseError
from pawsettings.settings.model import AppSettings

logger: Final = logging.getLogger(__name__)


def decode_record(raw: str) -> dict[str, Any]:
    """Parse a stored settings record.

    Args:
        raw: JSON text from the key-value store

    Returns:
        The decoded record

    Raises:
        SettingsParseError: If the text is not JSON or not a JSON object
    """
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise SettingsParseError(f"Stored settings are not valid JSON: {exc}", exc) from exc

    if not isinstance(data, dict):
        raise SettingsParseError(
            f"Stored settings must be a JSON object, got {type(data).__name__}"
        )
    return data


def assign(settings: AppSettings, key: str, value: Any) -> None:
    """Set one key on a record, validating it if it belongs to the schema.

    Keys outside the schema are stored as extra fields without validation.

    Raises:
        InvalidSettingError: If the value fails the field's validation
    """
    name = AppSettings.field_for_key(key)
    if name is None:
        settings.set_extra(key, value)
        return

    try:
        setattr(settings, name, value)
    except ValidationError as err:
        reason = "; ".join(e["msg"] for e in err.errors())
        raise InvalidSettingError(key, value, reason) from err


def merge_record(base: AppSettings, stored: Mapping[str, Any]) -> AppSettings:
    """Overlay stored values onto a copy of ``base``.

    Stored values win per field, including falsy ones. A value that fails
    its field's validation is dropped and the base value kept.

    Args:
        base: Record supplying the defaults
        stored: Decoded stored record

    Returns:
        A new merged record
    """
    merged = base.model_copy(deep=True)
    for key, value in stored.items():
        try:
            assign(merged, key, value)
        except InvalidSettingError as err:
            logger.warning("Ignoring stored setting %s, keeping default: %s", key, err.reason)
    return merged
