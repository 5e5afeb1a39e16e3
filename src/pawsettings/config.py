"""Client configuration loaded from YAML."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import ClassVar, Final

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from pawsettings.constants import DEFAULT_STAKING_URL, STORE_KEY
from pawsettings.errors import ConfigError
from pawsettings.i18n.locale import DEFAULT_LANGUAGES, LanguageOption

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class ClientConfig(BaseModel):
    """Where the settings record lives and how languages are resolved.

    All values have defaults, so a missing config file is not an error.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("pawsettings.yaml"),
        Path("~/.config/pawsettings/config.yaml").expanduser(),
        Path("/etc/pawsettings/config.yaml"),
    ]

    # Storage
    store_path: Path = Field(
        Path("~/.config/pawsettings/store.json"),
        validate_default=True,
        description="JSON file holding the key-value store",
    )
    store_key: str = Field(STORE_KEY, min_length=1, description="Namespace key of the record")

    # Languages
    default_language: str = Field("en", min_length=1, description="Fallback language id")
    available_languages: list[LanguageOption] = Field(
        default_factory=lambda: list(DEFAULT_LANGUAGES),
        description="Languages with translations, in display order",
    )

    # Staking lookups
    staking_url: str = Field(DEFAULT_STAKING_URL, description="Staking address lookup endpoint")
    request_timeout: float = Field(10.0, gt=0, description="HTTP timeout (seconds)")

    # ---- validators ----
    @field_validator("store_path")
    @classmethod
    def expand_store_path(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("available_languages")
    @classmethod
    def require_language_ids(cls, v: list[LanguageOption]) -> list[LanguageOption]:
        if any(not lang.get("id") for lang in v):
            raise ValueError("every available language needs an id")
        return v

    @classmethod
    def find_config_file(cls) -> Path | None:
        """Locate a config file from the environment or default paths.

        Raises:
            ConfigError: If PAWSETTINGS_CONFIG names a missing file
        """
        env_path = os.environ.get("PAWSETTINGS_CONFIG")
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise ConfigError(f"Config file from PAWSETTINGS_CONFIG not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> ClientConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated ClientConfig; defaults if no file was found

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        if path is None:
            path = cls.find_config_file()
            if path is None:
                logger.debug("No configuration file found, using defaults")
                return cls()
        elif not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(_interpolate_env(path.read_text(encoding="utf-8")))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read config YAML: {exc}") from exc

        try:
            config = cls.model_validate(data or {})
        except ValidationError as err:
            raise ConfigError(f"Invalid configuration:\n{err}") from err

        logger.debug("Configuration loaded from %s", path)
        return config
