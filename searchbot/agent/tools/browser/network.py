"""Request filtering and URL checks for browser-driven tools."""

from __future__ import annotations

import ipaddress
from collections.abc import Iterable
from urllib.parse import urlparse

_LOCAL_HOSTNAMES = {
    "localhost",
    "localhost.localdomain",
    "host.docker.internal",
}


def resource_block_reason(
    resource_type: str,
    url: str,
    *,
    blocked_resource_types: Iterable[str],
    block_file_scheme: bool,
) -> str | None:
    """Return why a subresource request should be aborted, or None to let it through."""
    if resource_type in set(blocked_resource_types):
        return f"resource type blocked: {resource_type}"

    scheme = (urlparse(url).scheme or "").lower()
    if scheme == "file" and block_file_scheme:
        return "file:// requests are blocked"
    return None


def validate_result_url(url: str, *, allow_private_network: bool) -> tuple[bool, str]:
    """Check a result URL before the browser is pointed at it."""
    parsed = urlparse(url)
    scheme = (parsed.scheme or "").lower()
    if scheme not in {"http", "https"}:
        return False, f"Only http/https URLs are allowed, got '{scheme or 'none'}'"

    host = parsed.hostname
    if not host:
        return False, "URL host is required"

    if not allow_private_network and is_private_or_local_host(host):
        return False, f"Private/local host blocked: {host}"

    return True, ""


def is_private_or_local_host(host: str) -> bool:
    """Check whether a host is local/private based on hostname or literal IP."""
    normalized = host.rstrip(".").lower()

    if normalized in _LOCAL_HOSTNAMES or normalized.endswith(".local"):
        return True

    try:
        ip = ipaddress.ip_address(normalized)
    except ValueError:
        return False

    return (
        ip.is_private
        or ip.is_loopback
        or ip.is_link_local
        or ip.is_reserved
        or ip.is_multicast
        or ip.is_unspecified
    )
