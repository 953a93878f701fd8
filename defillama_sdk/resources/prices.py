"""Token price endpoints served from the coins host."""

import json
from collections.abc import Iterable
from typing import Any

from defillama_sdk._internal.dispatch import BaseUrl
from defillama_sdk.resources._base import Resource, join_coins, quote_segment


class PricesResource(Resource):
    """Current and historical token prices.

    Coins are identified as "chain:address" (e.g.,
    "ethereum:0xdF574c24545E5FfEcb9a659c229253D4111d87e1") or
    "coingecko:<id>" (e.g., "coingecko:ethereum").
    """

    async def get_current_prices(
        self, coins: str | Iterable[str], search_width: str | None = None
    ) -> dict[str, Any]:
        """Get current prices for a set of coins.

        Args:
            coins: Coin identifiers.
            search_width: How far back to look for a price (e.g., "4h").

        Returns:
            {"coins": {<id>: {price, symbol, timestamp, confidence, ...}}}
        """
        return await self._client.get(
            f"/prices/current/{join_coins(coins)}",
            base=BaseUrl.COINS,
            params={"searchWidth": search_width or None},
        )

    async def get_historical_prices(
        self, timestamp: int, coins: str | Iterable[str], search_width: str | None = None
    ) -> dict[str, Any]:
        """Get prices for a set of coins at a unix timestamp."""
        return await self._client.get(
            f"/prices/historical/{timestamp}/{join_coins(coins)}",
            base=BaseUrl.COINS,
            params={"searchWidth": search_width or None},
        )

    async def get_batch_historical_prices(
        self, coins: dict[str, list[int]], search_width: str | None = None
    ) -> dict[str, Any]:
        """Get prices for several coins, each at its own list of timestamps.

        Args:
            coins: Mapping of coin identifier to unix timestamps.
            search_width: How far around each timestamp to look for a price.
        """
        return await self._client.get(
            "/batchHistorical",
            base=BaseUrl.COINS,
            params={
                "coins": json.dumps(coins, separators=(",", ":")),
                "searchWidth": search_width or None,
            },
        )

    async def get_chart(
        self,
        coins: str | Iterable[str],
        *,
        start: int | None = None,
        end: int | None = None,
        span: int | None = None,
        period: str | None = None,
        search_width: str | None = None,
    ) -> dict[str, Any]:
        """Get price charts at regular intervals.

        Args:
            coins: Coin identifiers.
            start: First timestamp of the chart (unix seconds).
            end: Last timestamp of the chart. Use either start or end.
            span: Number of data points.
            period: Spacing between points (e.g., "2d", "1w").
            search_width: Tolerance around each point.
        """
        return await self._client.get(
            f"/chart/{join_coins(coins)}",
            base=BaseUrl.COINS,
            params={
                "start": start,
                "end": end,
                "span": span,
                "period": period,
                "searchWidth": search_width or None,
            },
        )

    async def get_percentage_change(
        self,
        coins: str | Iterable[str],
        *,
        timestamp: int | None = None,
        look_forward: bool | None = None,
        period: str | None = None,
    ) -> dict[str, Any]:
        """Get the percentage price change of coins over a period."""
        return await self._client.get(
            f"/percentage/{join_coins(coins)}",
            base=BaseUrl.COINS,
            params={
                "timestamp": timestamp,
                "lookForward": look_forward,
                "period": period,
            },
        )

    async def get_first_prices(self, coins: str | Iterable[str]) -> dict[str, Any]:
        """Get the earliest recorded price of each coin."""
        return await self._client.get(
            f"/prices/first/{join_coins(coins)}",
            base=BaseUrl.COINS,
        )

    async def get_block_at_timestamp(self, chain: str, timestamp: int) -> dict[str, Any]:
        """Get the closest block to a unix timestamp on a chain."""
        return await self._client.get(
            f"/block/{quote_segment(chain)}/{timestamp}",
            base=BaseUrl.COINS,
        )
