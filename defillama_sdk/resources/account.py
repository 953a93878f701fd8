"""Pro account usage endpoint."""

import asyncio
from typing import Any

from defillama_sdk._internal.dispatch.models import PRO_HOST
from defillama_sdk._internal.http import create_http_client
from defillama_sdk.exceptions import DefiLlamaConfigError, DefiLlamaError
from defillama_sdk.resources._base import Resource

USAGE_URL = f"{PRO_HOST}/usage"


class AccountResource(Resource):
    """API credits for the configured Pro key.

    The usage endpoint lives outside the dispatcher's URL layout, so it is
    called directly and does not use the classified error kinds.
    """

    async def get_usage(self) -> dict[str, Any]:
        """Get API usage for the configured key.

        Returns:
            Usage data, e.g. {"creditsLeft": 987654}.

        Raises:
            DefiLlamaConfigError: No API key is configured.
            DefiLlamaError: The API answered with a non-2xx status.
            TimeoutError: The configured timeout elapsed.
        """
        api_key = self._client.api_key
        if not api_key:
            raise DefiLlamaConfigError("API key required for usage endpoint")

        timeout = self._client.timeout_seconds
        async with asyncio.timeout(timeout):
            async with create_http_client(
                timeout=timeout, transport=self._client.transport
            ) as http:
                response = await http.get(
                    f"{USAGE_URL}/{api_key}",
                    headers={"Accept": "application/json"},
                )
                if response.is_success:
                    return response.json()
                raise DefiLlamaError(f"Failed to fetch usage: {response.reason_phrase}")
