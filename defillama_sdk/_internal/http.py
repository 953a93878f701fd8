"""Shared HTTP client configuration."""

import httpx

from defillama_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.
        transport: Optional transport override (custom proxies, test doubles).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        transport=transport,
        headers={"User-Agent": f"defillama-sdk/{__version__}"},
    )
