"""Bitcoin and Ethereum ETF endpoints (Pro)."""

from typing import Any, Literal

from defillama_sdk.resources._base import Resource, quote_segment

FdvPeriod = Literal["7", "30", "ytd", "365"]


class EtfsResource(Resource):
    """ETF assets, flows and FDV performance by category."""

    async def _get(self, path: str, namespace: str = "etfs") -> Any:
        return await self._client.get(path, requires_auth=True, namespace=namespace)

    async def get_overview(self) -> list[dict[str, Any]]:
        """Get current Bitcoin ETF assets and flows."""
        return await self._get("/overview")

    async def get_overview_eth(self) -> list[dict[str, Any]]:
        """Get current Ethereum ETF assets and flows."""
        return await self._get("/overviewEth")

    async def get_history(self) -> list[dict[str, Any]]:
        return await self._get("/history")

    async def get_history_eth(self) -> list[dict[str, Any]]:
        return await self._get("/historyEth")

    async def get_fdv_performance(self, period: FdvPeriod) -> list[dict[str, Any]]:
        """Get FDV performance per category over a period.

        Args:
            period: "7", "30", "ytd" or "365".
        """
        return await self._get(f"/performance/{quote_segment(period)}", namespace="fdv")
