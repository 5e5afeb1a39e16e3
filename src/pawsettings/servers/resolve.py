"""Resolve the logical server name into concrete endpoints."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Final

from pawsettings.constants import (
    DEFAULT_SERVER_NAME,
    SERVER_CUSTOM,
    SERVER_OFFLINE,
    SERVER_RANDOM,
)
from pawsettings.servers.catalog import (
    SERVER_OPTIONS,
    ServerOption,
    find_server_option,
    random_candidates,
)

if TYPE_CHECKING:
    from pawsettings.settings.model import AppSettings

logger: Final = logging.getLogger(__name__)


def _apply(settings: AppSettings, option: ServerOption, server_name: str) -> None:
    settings.server_name = server_name
    settings.server_api = option.api
    settings.server_ws = option.ws
    settings.server_auth = option.auth


def resolve_server(
    settings: AppSettings,
    options: tuple[ServerOption, ...] = SERVER_OPTIONS,
    rng: random.Random | None = None,
) -> AppSettings:
    """Derive the server endpoint fields from ``server_name``, in place.

    - ``custom``: endpoints are left as the caller set them
    - ``offline``: switches back to the default catalog entry
    - a catalog value (other than ``random``): that entry's endpoints
    - ``random``, None or anything unknown: a uniform pick among the entries
      flagged ``should_random``; ``server_name`` becomes ``random``

    A random pick is redone on every call, so it does not survive a restart.

    Args:
        settings: Record to update
        options: Server catalog
        rng: Random source (default: module-level ``random``)

    Returns:
        The same record, for chaining
    """
    name = settings.server_name

    if name == SERVER_CUSTOM:
        logger.info("Server: custom (%s, %s)", settings.server_api, settings.server_ws)
        return settings

    if name == SERVER_OFFLINE:
        logger.info("Server: leaving offline mode for %r", DEFAULT_SERVER_NAME)
        name = DEFAULT_SERVER_NAME

    option = find_server_option(name, options)
    if option is not None and option.value != SERVER_RANDOM:
        logger.info("Server: found %r -> %s", option.value, option.api)
        _apply(settings, option, option.value)
        return settings

    candidates = random_candidates(options)
    if not candidates:
        raise ValueError("Server catalog has no entries eligible for random selection")

    picked = (rng or random).choice(candidates)
    if option is None:
        logger.info("Server: unknown name %r, picking at random", name)
    logger.info("Server: random -> %r (%s)", picked.value, picked.api)
    _apply(settings, picked, SERVER_RANDOM)
    return settings
