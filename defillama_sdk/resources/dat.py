"""Digital Asset Treasury (DAT) endpoints (Pro)."""

from typing import Any

from defillama_sdk.resources._base import Resource, quote_segment


class DatResource(Resource):
    """Institutional crypto holdings of public companies.

    These endpoints sit directly under the API key on the Pro host, with no
    "/api" namespace.
    """

    async def get_institutions(self) -> dict[str, Any]:
        """List institutions holding digital assets, with aggregate totals."""
        return await self._client.get("/dat/institutions", requires_auth=True, namespace="")

    async def get_institution(self, symbol: str) -> dict[str, Any]:
        """Get holdings and transaction history of one institution.

        Args:
            symbol: Ticker of the institution (e.g., "MSTR").
        """
        return await self._client.get(
            f"/dat/institutions/{quote_segment(symbol)}",
            requires_auth=True,
            namespace="",
        )
