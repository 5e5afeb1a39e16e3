"""Client for the staking address lookup service."""

from __future__ import annotations

import logging
from typing import Any, Final

import requests

from pawsettings.constants import DEFAULT_STAKING_URL
from pawsettings.staking.errors import NetworkError, ParseError, StakingAPIError

logger: Final = logging.getLogger(__name__)


class StakingClient:
    """Looks up the staking accounts registered for a wallet address."""

    def __init__(self, url: str = DEFAULT_STAKING_URL, timeout: float = 10.0) -> None:
        """Initialize the client.

        Args:
            url: Lookup endpoint; the address is passed as ``paw_address``
            timeout: Timeout for HTTP requests in seconds
        """
        self.url = url
        self.timeout = timeout

    def find_staking_addresses(self, address: str) -> list[str]:
        """Return the staking accounts for ``address``.

        An empty response body means no staking accounts.

        Raises:
            NetworkError: When the service cannot be reached
            StakingAPIError: For non-200 responses
            ParseError: When the body is not the expected JSON shape
        """
        try:
            resp = requests.get(self.url, params={"paw_address": address}, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Staking lookup network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            try:
                body = resp.json()
            except ValueError:
                body = None
            logger.error("Staking lookup failed: HTTP %s", resp.status_code)
            raise StakingAPIError.from_response(
                body if isinstance(body, dict) else {}, resp.status_code
            )

        try:
            data: Any = resp.json()
        except ValueError as exc:
            if not resp.text.strip():
                return []
            raise ParseError(f"Staking response is not JSON: {exc}", exc) from exc

        if not data:
            return []

        accounts = data.get("stake_accounts") if isinstance(data, dict) else None
        if not isinstance(accounts, list):
            raise ParseError("Staking response has no stake_accounts list")

        logger.debug("Found %d staking accounts for %s", len(accounts), address)
        return [str(account) for account in accounts]
