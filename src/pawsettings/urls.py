"""URL helpers for server endpoints and embedded app pages."""

from __future__ import annotations

import re
import urllib.parse

from pawsettings.errors import ServerNotResolvedError

_SCHEME_RE = re.compile(r"https?://")


def strip_scheme(url: str) -> str:
    """Remove every http(s) scheme prefix from a URL."""
    return _SCHEME_RE.sub("", url)


def base_url(api_url: str | None) -> str:
    """Return the origin of an API URL with a root path.

    e.g. ``https://rpc.paw.digital/`` from ``https://rpc.paw.digital/api/node-api``

    Args:
        api_url: Absolute API URL

    Returns:
        ``scheme://host[:port]/``

    Raises:
        ServerNotResolvedError: If the URL is unset or not absolute
    """
    if not api_url:
        raise ServerNotResolvedError("No server API is configured")

    parsed = urllib.parse.urlsplit(api_url)
    if not parsed.scheme or not parsed.netloc:
        raise ServerNotResolvedError(f"Server API is not an absolute URL: {api_url}")

    return urllib.parse.urlunsplit((parsed.scheme, parsed.netloc, "/", "", ""))


def framed_app_url(url: str) -> str:
    """Mark an app URL as embedded by appending the ``framed`` query flag."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}framed"
