"""Token emission and unlock schedule endpoints (Pro)."""

from typing import Any

from pydantic import ValidationError

from defillama_sdk.exceptions import DefiLlamaValidationError
from defillama_sdk.models import EmissionDetailResponse
from defillama_sdk.resources._base import Resource, quote_segment


class EmissionsResource(Resource):
    """Vesting schedules, unlock events and token allocations.

    Every endpoint requires a Pro API key.
    """

    async def get_all(self) -> list[dict[str, Any]]:
        """List all tokens with unlock schedules, supply and next unlock event."""
        return await self._client.get("/emissions", requires_auth=True)

    async def get_by_protocol(self, protocol: str) -> EmissionDetailResponse:
        """Get the documented vesting schedule and allocation of a protocol.

        The API returns {"body": <JSON string>, "lastModified": <timestamp>};
        the body string is decoded into a structured document.

        Args:
            protocol: Protocol slug (e.g., "hyperliquid", "aave").

        Returns:
            EmissionDetailResponse with the decoded body.

        Raises:
            DefiLlamaValidationError: The envelope or its body is malformed.
        """
        payload = await self._client.get(
            f"/emission/{quote_segment(protocol)}",
            requires_auth=True,
        )
        try:
            return EmissionDetailResponse.model_validate(payload)
        except ValidationError as e:
            raise DefiLlamaValidationError(
                f"Malformed emission detail for {protocol!r}: {e}"
            ) from e
