"""Settings record schema and its two default tables."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from pawsettings.constants import DEFAULT_SERVER_NAME

WalletStore = Literal["localStorage", "none"]
PoWSource = Literal["server", "clientCPU", "clientWebGL", "best", "custom"]
LedgerConnectionType = Literal["usb", "bluetooth"]


class AppSettings(BaseModel):
    """The client settings record.

    Attributes use Python names; the camelCase aliases are the keys of the
    persisted JSON record and are what other clients reading the same store
    expect. Field defaults are the construction-time defaults
    (``INITIAL_DEFAULTS``); ``clear()`` uses ``RESET_DEFAULTS`` instead.

    Keys outside the schema are kept as extra fields so that records written
    by newer clients survive a load/save cycle.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )

    # Display
    language: str | None = None
    display_denomination: str = "nano"
    display_currency: str = "USD"
    identicons_style: str = "natricon"
    light_mode_enabled: bool = False

    # Wallet
    wallet_store: WalletStore = "localStorage"
    wallet_version: int | None = 1
    default_representative: str | None = None
    lock_on_close: int = 1
    lock_inactivity_minutes: int = 30
    ledger_reconnect: LedgerConnectionType = "usb"

    # Proof of work
    pow_source: PoWSource = "best"
    multiplier_source: int = 1
    custom_work_server: str | None = ""

    # Receiving
    pending_option: str = "amount"
    minimum_receive: str | None = "0.001"

    # Server selection; the endpoint fields are derived from server_name
    server_name: str | None = DEFAULT_SERVER_NAME
    server_api: str | None = Field(None, alias="serverAPI")
    server_ws: str | None = Field(None, alias="serverWS")
    server_auth: str | None = None

    anonymizer_api: str | None = Field(
        "https://fresh.paw.digital/createDeposit", alias="anonymizerAPI"
    )

    # ---- validators ----
    @field_validator("server_name", mode="before")
    @classmethod
    def keep_unresolved_server_name(cls, v: Any) -> Any:
        # Anything that is not a name resolves to a random server later
        if isinstance(v, (str, int, float)) and not isinstance(v, bool):
            return v
        return None

    @classmethod
    def field_for_key(cls, key: str) -> str | None:
        """Map a storage key or attribute name to the attribute name.

        Args:
            key: camelCase storage key or snake_case attribute name

        Returns:
            The attribute name, or None if the key is not part of the schema
        """
        return _FIELD_BY_KEY.get(key)

    @classmethod
    def initial(cls) -> AppSettings:
        """Record holding the construction-time defaults."""
        return cls.model_validate(dict(INITIAL_DEFAULTS))

    @classmethod
    def reset(cls) -> AppSettings:
        """Record holding the defaults applied by ``clear()``."""
        return cls.model_validate(dict(RESET_DEFAULTS))

    def set_extra(self, key: str, value: Any) -> None:
        """Store a key that is not part of the schema."""
        if self.__pydantic_extra__ is None:
            self.__pydantic_extra__ = {}
        self.__pydantic_extra__[key] = value

    def get_extra(self, key: str) -> Any:
        """Return the value of a key outside the schema, or None."""
        return (self.__pydantic_extra__ or {}).get(key)

    def to_record(self) -> dict[str, Any]:
        """Dump the record keyed by storage names, extras included."""
        return self.model_dump(by_alias=True)


_FIELD_BY_KEY: Final[dict[str, str]] = {
    **{name: name for name in AppSettings.model_fields},
    **{info.alias: name for name, info in AppSettings.model_fields.items() if info.alias},
}

INITIAL_DEFAULTS: Final[Mapping[str, Any]] = MappingProxyType(
    AppSettings().model_dump(by_alias=True)
)

# clear() resets to a different table than the one used at start-up
RESET_OVERRIDES: Final[Mapping[str, Any]] = MappingProxyType(
    {
        "language": "en",
        "serverName": "random",
        "anonymizerAPI": "https://fresh.paw.digital/api",
        "minimumReceive": "0.000001",
    }
)

RESET_DEFAULTS: Final[Mapping[str, Any]] = MappingProxyType(
    {**INITIAL_DEFAULTS, **RESET_OVERRIDES}
)
