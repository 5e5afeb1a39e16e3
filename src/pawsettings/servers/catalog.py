"""Static catalog of node servers the client can connect to."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict

from pawsettings.constants import SEEDED_API_HOST
from pawsettings.urls import strip_scheme


class ServerOption(BaseModel):
    """A selectable node server.

    ``api`` and ``ws`` are None only for the ``random`` placeholder entry,
    which is never itself a random pick (``should_random`` is False).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    api: str | None
    ws: str | None
    auth: str | None = None
    should_random: bool = False


SERVER_OPTIONS: Final[tuple[ServerOption, ...]] = (
    ServerOption(name="Random", value="random", api=None, ws=None),
    ServerOption(
        name="Peering node",
        value="peer",
        api="https://rpc.paw.digital",
        ws="wss://ws.paw.digital",
        should_random=True,
    ),
    ServerOption(
        name="Peering node #2",
        value="peer2",
        api="https://rpc3.paw.digital",
        ws="wss://ws3.paw.digital",
        should_random=True,
    ),
    ServerOption(
        name="Peering node #3",
        value="peer3",
        api="https://rpc2.paw.digital",
        ws="wss://ws2.paw.digital",
        should_random=True,
    ),
)


def find_server_option(
    value: str | None, options: tuple[ServerOption, ...] = SERVER_OPTIONS
) -> ServerOption | None:
    """Return the catalog entry whose ``value`` matches, if any."""
    return next((option for option in options if option.value == value), None)


def random_candidates(
    options: tuple[ServerOption, ...] = SERVER_OPTIONS,
) -> tuple[ServerOption, ...]:
    """Return the entries eligible for random selection."""
    return tuple(option for option in options if option.should_random)


def known_api_endpoints(options: tuple[ServerOption, ...] = SERVER_OPTIONS) -> tuple[str, ...]:
    """Build the list of first-party API hosts, without scheme.

    The seeded host comes first, followed by every catalog API in order.
    """
    hosts = [SEEDED_API_HOST]
    hosts.extend(strip_scheme(option.api) for option in options if option.api)
    return tuple(hosts)


# Simplified list for comparison in other modules
KNOWN_API_ENDPOINTS: Final[tuple[str, ...]] = known_api_endpoints()


def is_known_endpoint(url: str) -> bool:
    """Check whether a URL points at a first-party API host.

    Args:
        url: Absolute or scheme-less URL

    Returns:
        True if the scheme-stripped URL is in KNOWN_API_ENDPOINTS
    """
    return strip_scheme(url).rstrip("/") in KNOWN_API_ENDPOINTS
