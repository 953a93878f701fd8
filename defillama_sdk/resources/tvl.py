"""TVL (Total Value Locked) endpoints for protocols and chains."""

from typing import Any

from defillama_sdk.resources._base import Resource, quote_segment


class TvlResource(Resource):
    """Protocol and chain TVL data.

    Example:
        protocols = await client.tvl.get_protocols()
        aave = await client.tvl.get_tvl("aave")
    """

    async def get_protocols(self) -> list[dict[str, Any]]:
        """List all protocols with their current TVL."""
        return await self._client.get("/protocols")

    async def get_protocol(self, protocol: str) -> dict[str, Any]:
        """Get historical TVL and metadata for a protocol.

        Args:
            protocol: Protocol slug (e.g., "aave", "uniswap").

        Returns:
            Protocol details including per-chain TVL history.
        """
        return await self._client.get(f"/protocol/{quote_segment(protocol)}")

    async def get_tvl(self, protocol: str) -> float:
        """Get the current TVL of a protocol as a single number."""
        return await self._client.get(f"/tvl/{quote_segment(protocol)}")

    async def get_chains(self) -> list[dict[str, Any]]:
        """List current TVL for every chain."""
        return await self._client.get("/v2/chains")

    async def get_historical_chain_tvl(self, chain: str | None = None) -> list[dict[str, Any]]:
        """Get historical TVL, for one chain or summed over all chains.

        Args:
            chain: Chain name (e.g., "Ethereum"). Omit for the all-chains series.

        Returns:
            List of {date, tvl} data points.
        """
        if chain:
            return await self._client.get(f"/v2/historicalChainTvl/{quote_segment(chain)}")
        return await self._client.get("/v2/historicalChainTvl")

    async def get_token_protocols(self, symbol: str) -> list[dict[str, Any]]:
        """List protocols holding a token, with amounts per protocol.

        Requires a Pro API key.
        """
        return await self._client.get(
            f"/tokenProtocols/{quote_segment(symbol)}",
            requires_auth=True,
        )

    async def get_inflows(
        self,
        protocol: str,
        start_timestamp: int,
        end_timestamp: int,
        tokens_to_exclude: str | None = None,
    ) -> dict[str, Any]:
        """Get token inflows and outflows for a protocol between two timestamps.

        Requires a Pro API key.

        Args:
            protocol: Protocol slug.
            start_timestamp: Start of the window (unix seconds).
            end_timestamp: End of the window (unix seconds).
            tokens_to_exclude: Comma-separated token symbols to leave out.

        Returns:
            Outflow totals and the old/current token balances.
        """
        return await self._client.get(
            f"/inflows/{quote_segment(protocol)}/{start_timestamp}",
            requires_auth=True,
            params={
                "end": end_timestamp,
                "tokensToExclude": tokens_to_exclude or "",
            },
        )

    async def get_chain_assets(self) -> dict[str, Any]:
        """Get asset breakdown (canonical, native, third-party) per chain.

        Requires a Pro API key.
        """
        return await self._client.get("/chainAssets", requires_auth=True)
