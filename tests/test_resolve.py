import random

import pytest

from pawsettings.servers.catalog import SERVER_OPTIONS, ServerOption, random_candidates
from pawsettings.servers.resolve import resolve_server
from pawsettings.settings.model import AppSettings

RANDOM_APIS = {option.api for option in random_candidates()}


def _settings(**kwargs: object) -> AppSettings:
    return AppSettings(**kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize("name", ["peer", "peer2", "peer3"])
def test_catalog_name_copies_endpoints(name: str) -> None:
    settings = resolve_server(_settings(server_name=name))
    option = next(o for o in SERVER_OPTIONS if o.value == name)
    assert settings.server_name == name
    assert settings.server_api == option.api
    assert settings.server_ws == option.ws
    assert settings.server_auth == option.auth


def test_resolution_is_idempotent_for_catalog_names() -> None:
    settings = resolve_server(_settings(server_name="peer2"))
    first = (settings.server_api, settings.server_ws)
    resolve_server(settings)
    assert (settings.server_api, settings.server_ws) == first


def test_custom_passthrough() -> None:
    settings = _settings(server_name="custom", server_api="https://x", server_ws="wss://x")
    resolve_server(settings)
    assert settings.server_name == "custom"
    assert settings.server_api == "https://x"
    assert settings.server_ws == "wss://x"


def test_offline_normalizes_to_default_entry() -> None:
    settings = resolve_server(_settings(server_name="offline"))
    assert settings.server_name == "peer"
    assert settings.server_api == "https://rpc.paw.digital"
    assert settings.server_ws == "wss://ws.paw.digital"


def test_unknown_name_falls_back_to_random() -> None:
    settings = resolve_server(_settings(server_name="not-a-real-server"), rng=random.Random(7))
    assert settings.server_name == "random"
    assert settings.server_api in RANDOM_APIS


def test_random_selection_domain() -> None:
    rng = random.Random(42)
    seen = set()
    for _ in range(1000):
        settings = resolve_server(_settings(server_name="random"), rng=rng)
        assert settings.server_name == "random"
        assert settings.server_api in RANDOM_APIS
        option = next(o for o in random_candidates() if o.api == settings.server_api)
        assert settings.server_ws == option.ws
        seen.add(settings.server_api)
    assert len(seen) > 1


def test_auth_is_propagated() -> None:
    options = (
        ServerOption(name="Random", value="random", api=None, ws=None),
        ServerOption(
            name="Private",
            value="private",
            api="https://node.example",
            ws="wss://node.example",
            auth="secret",
            should_random=True,
        ),
    )
    settings = resolve_server(_settings(server_name="private"), options)
    assert settings.server_auth == "secret"

    settings = resolve_server(_settings(server_name="random"), options)
    assert settings.server_api == "https://node.example"
    assert settings.server_auth == "secret"


def test_empty_random_pool_is_rejected() -> None:
    options = (ServerOption(name="Random", value="random", api=None, ws=None),)
    with pytest.raises(ValueError):
        resolve_server(_settings(server_name="random"), options)


@pytest.mark.parametrize("name", [None, ""])
def test_missing_name_falls_back_to_random(name: str | None) -> None:
    settings = resolve_server(_settings(server_name=name), rng=random.Random(3))
    assert settings.server_name == "random"
    assert settings.server_api in RANDOM_APIS
    option = next(o for o in random_candidates() if o.api == settings.server_api)
    assert settings.server_ws == option.ws
