"""Helpers for keeping credentials out of log records and error messages."""

from __future__ import annotations

import re

_API_KEY_PARAM = re.compile(r"(api_key=)[^&]*")


def mask_proxy_password(proxy_url: str) -> str:
    """Mask password in proxy URL for display.

    Args:
        proxy_url: Proxy URL that may contain credentials.

    Returns:
        URL with password masked.
    """
    if "@" not in proxy_url:
        return proxy_url

    # Split into protocol and rest
    if "://" in proxy_url:
        protocol, rest = proxy_url.split("://", 1)
    else:
        protocol, rest = "", proxy_url

    creds, host = rest.rsplit("@", 1)
    if ":" in creds:
        user, _ = creds.split(":", 1)
        creds = f"{user}:****"
    rest = f"{creds}@{host}"

    if protocol:
        return f"{protocol}://{rest}"
    return rest


def mask_api_key(url: str) -> str:
    """Replace the value of the ``api_key`` query parameter with asterisks."""
    return _API_KEY_PARAM.sub(r"\1****", url)
