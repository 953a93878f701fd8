"""Shared base for API resources."""

from collections.abc import Iterable

from defillama_sdk._internal.dispatch import DispatchClient, quote_segment

__all__ = ["Resource", "join_coins", "quote_segment"]


class Resource:
    """A group of endpoints sharing the façade's dispatcher.

    Resources hold no state of their own; the dispatcher is owned by
    defillama_sdk.DefiLlama.
    """

    def __init__(self, client: DispatchClient) -> None:
        self._client = client


def join_coins(coins: str | Iterable[str]) -> str:
    """Join coin identifiers ("chain:address" or "coingecko:id") for a path.

    A bare string is taken as a single identifier.
    """
    if isinstance(coins, str):
        return coins
    return ",".join(coins)
