"""Yield farming, lending and staking rate endpoints (Pro)."""

from typing import Any

from defillama_sdk.resources._base import Resource, quote_segment

YIELDS_NAMESPACE = "yields"


class YieldsResource(Resource):
    """Pool APYs, borrow rates, perps funding and LSD rates.

    Every endpoint requires a Pro API key.
    """

    async def _get(self, path: str) -> Any:
        return await self._client.get(path, requires_auth=True, namespace=YIELDS_NAMESPACE)

    async def get_pools(self) -> dict[str, Any]:
        """List all yield pools with current APY and TVL."""
        return await self._get("/pools")

    async def get_pools_old(self) -> dict[str, Any]:
        """List pools in the legacy format (includes pool_old and url)."""
        return await self._get("/poolsOld")

    async def get_pool_chart(self, pool: str) -> dict[str, Any]:
        """Get historical APY and TVL of one pool.

        Args:
            pool: Pool UUID from get_pools().
        """
        return await self._get(f"/chart/{quote_segment(pool)}")

    async def get_borrow_pools(self) -> dict[str, Any]:
        return await self._get("/poolsBorrow")

    async def get_lend_borrow_chart(self, pool: str) -> dict[str, Any]:
        return await self._get(f"/chartLendBorrow/{quote_segment(pool)}")

    async def get_perps(self) -> dict[str, Any]:
        return await self._get("/perps")

    async def get_lsd_rates(self) -> list[dict[str, Any]]:
        return await self._get("/lsdRates")
