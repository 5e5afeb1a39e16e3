from pathlib import Path

import pytest

from pawsettings.config import ClientConfig
from pawsettings.constants import STORE_KEY
from pawsettings.errors import ConfigError

GOOD_YAML = """
store_path: "${PAW_TEST_DIR}/store.json"
store_key: test-settings
default_language: de
available_languages:
  - id: en
    label: English
  - id: de
    label: Deutsch
request_timeout: 3
"""

BAD_YAML = """
request_timeout: -1
"""


def test_valid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAW_TEST_DIR", str(tmp_path))
    cfg_file = tmp_path / "good.yaml"
    cfg_file.write_text(GOOD_YAML)

    cfg = ClientConfig.load(cfg_file)

    assert cfg.store_path == tmp_path / "store.json"
    assert cfg.store_key == "test-settings"
    assert cfg.default_language == "de"
    assert [lang["id"] for lang in cfg.available_languages] == ["en", "de"]
    assert cfg.request_timeout == 3.0


def test_invalid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(BAD_YAML)
    with pytest.raises(ConfigError):
        ClientConfig.load(cfg_file)


def test_language_without_id_is_invalid(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text("available_languages:\n  - label: Nameless\n")
    with pytest.raises(ConfigError):
        ClientConfig.load(cfg_file)


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ClientConfig.load(tmp_path / "absent.yaml")


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yaml"
    cfg_file.write_text("")
    assert ClientConfig.load(cfg_file).store_key == STORE_KEY


def test_defaults_when_nothing_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PAWSETTINGS_CONFIG", raising=False)
    monkeypatch.setattr(ClientConfig, "DEFAULT_CONFIG_PATHS", [tmp_path / "nope.yaml"])
    cfg = ClientConfig.load()
    assert cfg.store_key == STORE_KEY
    assert cfg.store_path == Path("~/.config/pawsettings/store.json").expanduser()


def test_env_variable_points_to_missing_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PAWSETTINGS_CONFIG", str(tmp_path / "absent.yaml"))
    with pytest.raises(ConfigError):
        ClientConfig.load()


def test_env_variable_is_used(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "env.yaml"
    cfg_file.write_text("store_key: from-env\n")
    monkeypatch.setenv("PAWSETTINGS_CONFIG", str(cfg_file))
    assert ClientConfig.load().store_key == "from-env"
