"""Cross-chain bridge volume and transaction endpoints (Pro)."""

from typing import Any

from defillama_sdk._internal.dispatch import BaseUrl
from defillama_sdk.resources._base import Resource, quote_segment


class BridgesResource(Resource):
    """Bridge volumes, daily stats and transactions.

    Served under the Pro host's bridges namespace; every endpoint requires
    an API key.
    """

    async def get_all(self, *, include_chains: bool | None = None) -> dict[str, Any]:
        """List all bridges with summary volumes.

        Args:
            include_chains: Include the chains each bridge supports.
        """
        return await self._client.get(
            "/bridges",
            base=BaseUrl.BRIDGES,
            params={"includeChains": include_chains},
        )

    async def get_by_id(self, bridge_id: int) -> dict[str, Any]:
        """Get volume details for one bridge."""
        return await self._client.get(f"/bridge/{bridge_id}", base=BaseUrl.BRIDGES)

    async def get_volume_by_chain(self, chain: str) -> list[dict[str, Any]]:
        """Get historical bridge volume for a chain ("all" for every chain)."""
        return await self._client.get(
            f"/bridgevolume/{quote_segment(chain)}",
            base=BaseUrl.BRIDGES,
        )

    async def get_day_stats(self, timestamp: int, chain: str) -> dict[str, Any]:
        """Get token and address statistics for one day on a chain."""
        return await self._client.get(
            f"/bridgedaystats/{timestamp}/{quote_segment(chain)}",
            base=BaseUrl.BRIDGES,
        )

    async def get_transactions(
        self,
        bridge_id: int,
        *,
        limit: int | None = None,
        start_timestamp: int | None = None,
        end_timestamp: int | None = None,
        source_chain: str | None = None,
        address: str | None = None,
    ) -> list[dict[str, Any]]:
        """List transactions that went through a bridge.

        Args:
            bridge_id: Bridge id from get_all().
            limit: Maximum number of transactions.
            start_timestamp: Only transactions after this unix timestamp.
            end_timestamp: Only transactions before this unix timestamp.
            source_chain: Only transactions from this chain.
            address: Only transactions involving this address
                (e.g., "ethereum:0x...").
        """
        return await self._client.get(
            f"/transactions/{bridge_id}",
            base=BaseUrl.BRIDGES,
            params={
                "limit": limit,
                "startTimestamp": start_timestamp,
                "endTimestamp": end_timestamp,
                "sourceChain": source_chain or None,
                "address": address or None,
            },
        )
