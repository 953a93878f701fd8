"""Stablecoin supply, chart and dominance endpoints."""

from typing import Any

from defillama_sdk._internal.dispatch import BaseUrl
from defillama_sdk.resources._base import Resource, quote_segment


class StablecoinsResource(Resource):
    """Stablecoin market caps, charts and dominance.

    Everything except get_dominance is served from the free stablecoins host.
    """

    async def get_stablecoins(self, include_prices: bool | None = None) -> dict[str, Any]:
        """List all stablecoins with their circulating amounts.

        Args:
            include_prices: Whether to include current prices.
        """
        return await self._client.get(
            "/stablecoins",
            base=BaseUrl.STABLECOINS,
            params={"includePrices": include_prices},
        )

    async def get_all_charts(self) -> list[dict[str, Any]]:
        """Get historical market cap summed over all stablecoins."""
        return await self._client.get("/stablecoincharts/all", base=BaseUrl.STABLECOINS)

    async def get_charts_by_chain(self, chain: str) -> list[dict[str, Any]]:
        """Get historical stablecoin market cap on one chain."""
        return await self._client.get(
            f"/stablecoincharts/{quote_segment(chain)}",
            base=BaseUrl.STABLECOINS,
        )

    async def get_stablecoin(self, asset: str | int) -> dict[str, Any]:
        """Get historical market cap and chain distribution of one stablecoin.

        Args:
            asset: Stablecoin id (e.g., 1 for USDT).
        """
        return await self._client.get(
            f"/stablecoin/{quote_segment(asset)}",
            base=BaseUrl.STABLECOINS,
        )

    async def get_chains(self) -> list[dict[str, Any]]:
        """Get current stablecoin market cap per chain."""
        return await self._client.get("/stablecoinchains", base=BaseUrl.STABLECOINS)

    async def get_prices(self) -> list[dict[str, Any]]:
        """Get historical prices of all stablecoins."""
        return await self._client.get("/stablecoinprices", base=BaseUrl.STABLECOINS)

    async def get_dominance(
        self, chain: str, stablecoin_id: int | None = None
    ) -> list[dict[str, Any]]:
        """Get stablecoin dominance on a chain over time.

        Requires a Pro API key.

        Args:
            chain: Chain name.
            stablecoin_id: Restrict to one stablecoin.
        """
        return await self._client.get(
            f"/stablecoindominance/{quote_segment(chain)}",
            requires_auth=True,
            namespace="stablecoins",
            params={"stablecoin": stablecoin_id},
        )
