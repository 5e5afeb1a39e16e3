"""Settings reconciliation service: load, merge, resolve and persist."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Any, Final

from pawsettings.constants import STORE_KEY
from pawsettings.errors import SettingsParseError
from pawsettings.i18n.locale import LocaleResolver, SystemLocaleResolver, resolve_language
from pawsettings.servers.catalog import SERVER_OPTIONS, ServerOption, known_api_endpoints
from pawsettings.servers.resolve import resolve_server
from pawsettings.settings.model import AppSettings
from pawsettings.settings.reconcile import assign, decode_record, merge_record
from pawsettings.storage.protocols import KeyValueStore
from pawsettings.urls import base_url

logger: Final = logging.getLogger(__name__)


class AppSettingsService:
    """Owner of the client settings record.

    The service holds the only live ``AppSettings`` instance and is its
    single writer: every change goes through ``set``, ``set_bulk`` or
    ``clear``, and each of those persists immediately. Readers get snapshot
    copies from ``settings``. Construct one service per process and pass it
    to whatever needs configuration.

    Examples:
        service = AppSettingsService(JsonFileStore(path))
        service.load()
        service.set("displayCurrency", "EUR")
        api = service.get("serverAPI")
    """

    def __init__(
        self,
        store: KeyValueStore,
        locale_resolver: LocaleResolver | None = None,
        *,
        store_key: str = STORE_KEY,
        server_options: tuple[ServerOption, ...] = SERVER_OPTIONS,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the service with construction-time defaults.

        Args:
            store: Persistent key-value store
            locale_resolver: Language source used when no language is stored
            store_key: Namespace key of the record in the store
            server_options: Server catalog
            rng: Random source for server selection
        """
        self.store = store
        self.locale_resolver = locale_resolver or SystemLocaleResolver()
        self.store_key = store_key
        self.server_options = server_options
        self.known_api_endpoints = known_api_endpoints(server_options)
        self._rng = rng
        self._settings = AppSettings.initial()

    @property
    def settings(self) -> AppSettings:
        """Snapshot of the current record."""
        return self._settings.model_copy(deep=True)

    def load(self) -> AppSettings:
        """Reconcile the record with the store.

        Stored values are merged over the current record, a language is
        picked if none is set, and the server endpoints are resolved.
        A corrupt stored record is ignored and the defaults are kept.

        Returns:
            Snapshot of the reconciled record
        """
        raw = self.store.get(self.store_key)
        if raw:
            try:
                stored = decode_record(raw)
            except SettingsParseError as exc:
                logger.warning("Stored settings unreadable, using defaults: %s", exc)
            else:
                self._settings = merge_record(self._settings, stored)
                logger.info("Settings loaded from store key %s", self.store_key)
        else:
            logger.info("No stored settings under %s, using defaults", self.store_key)

        if self._settings.language is None:
            self._settings.language = resolve_language(self.locale_resolver)

        self.resolve_server()
        return self.settings

    def resolve_server(self) -> None:
        """Derive the server endpoint fields from the server name."""
        resolve_server(self._settings, self.server_options, self._rng)

    def save(self) -> None:
        """Write the whole record to the store."""
        self._write(self._settings)

    def _write(self, settings: AppSettings) -> None:
        self.store.set(self.store_key, settings.model_dump_json(by_alias=True))
        logger.debug("Settings saved under %s", self.store_key)

    def get(self, key: str) -> Any:
        """Return a setting by storage key or attribute name.

        Unset and falsy values (``0``, ``False``, ``""``) are all returned
        as None; use ``settings`` to tell them apart.
        """
        name = AppSettings.field_for_key(key)
        value = getattr(self._settings, name) if name else self._settings.get_extra(key)
        return value or None

    def set(self, key: str, value: Any) -> None:
        """Change one setting and persist.

        Raises:
            InvalidSettingError: If the value fails the field's validation
        """
        self.set_bulk({key: value})

    def set_bulk(self, values: Mapping[str, Any]) -> None:
        """Change several settings and persist once.

        All values are validated before any is applied; unknown keys are
        stored as-is. Setting the server name re-resolves the endpoints.
        If the store write fails the record is left unchanged.

        Raises:
            InvalidSettingError: If any value fails its field's validation
        """
        updated = self._settings.model_copy(deep=True)
        for key, value in values.items():
            assign(updated, key, value)

        if any(AppSettings.field_for_key(key) == "server_name" for key in values):
            resolve_server(updated, self.server_options, self._rng)

        # The live record only changes once the store accepted the write
        self._write(updated)
        self._settings = updated

    def clear(self) -> None:
        """Remove the stored record and reset to the reset-time defaults."""
        self.store.remove(self.store_key)
        self._settings = AppSettings.reset()
        logger.info("Settings cleared")

    def base_url(self) -> str:
        """Origin of the resolved server API with a root path.

        Raises:
            ServerNotResolvedError: If no server API is set
        """
        return base_url(self._settings.server_api)
