"""Server catalog and server-selection resolution."""

from pawsettings.servers.catalog import (
    KNOWN_API_ENDPOINTS,
    SERVER_OPTIONS,
    ServerOption,
    find_server_option,
    is_known_endpoint,
)
from pawsettings.servers.resolve import resolve_server

__all__ = [
    "KNOWN_API_ENDPOINTS",
    "SERVER_OPTIONS",
    "ServerOption",
    "find_server_option",
    "is_known_endpoint",
    "resolve_server",
]
