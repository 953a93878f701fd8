"""Ecosystem-wide data: categories, forks, oracles, entities, treasuries, hacks, raises."""

from typing import Any

from defillama_sdk.resources._base import Resource


class EcosystemResource(Resource):
    """Pro endpoints describing the DeFi ecosystem as a whole."""

    async def get_categories(self) -> dict[str, Any]:
        return await self._client.get("/categories", requires_auth=True)

    async def get_forks(self) -> dict[str, Any]:
        return await self._client.get("/forks", requires_auth=True)

    async def get_oracles(self) -> dict[str, Any]:
        return await self._client.get("/oracles", requires_auth=True)

    async def get_entities(self) -> list[dict[str, Any]]:
        return await self._client.get("/entities", requires_auth=True)

    async def get_treasuries(self) -> list[dict[str, Any]]:
        return await self._client.get("/treasuries", requires_auth=True)

    async def get_hacks(self) -> list[dict[str, Any]]:
        """List recorded exploits with amount lost, technique and chain."""
        return await self._client.get("/hacks", requires_auth=True)

    async def get_raises(self) -> dict[str, Any]:
        """List funding rounds with investors and amounts."""
        return await self._client.get("/raises", requires_auth=True)
