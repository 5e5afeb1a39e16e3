"""Staking address lookups against the public staking service."""

from pawsettings.staking.api import StakingClient
from pawsettings.staking.errors import (
    ClientError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
    StakingAPIError,
)

__all__ = [
    "ClientError",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "RateLimitError",
    "ServerError",
    "StakingAPIError",
    "StakingClient",
]
