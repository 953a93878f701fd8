"""User-facing DefiLlama client.

Example:
    from defillama_sdk import DefiLlama

    # Free tier
    client = DefiLlama()
    protocols = await client.tvl.get_protocols()
    tvl = await client.tvl.get_tvl("aave")

    # Pro tier
    client = DefiLlama(api_key="your-api-key", timeout_ms=60000)
    holders = await client.tvl.get_token_protocols("ETH")
"""

import os

import httpx

from defillama_sdk._internal.dispatch import ClientConfig, DispatchClient
from defillama_sdk._internal.dispatch.models import DEFAULT_TIMEOUT_MS
from defillama_sdk.resources import (
    AccountResource,
    BridgesResource,
    DatResource,
    EcosystemResource,
    EmissionsResource,
    EtfsResource,
    FeesResource,
    PricesResource,
    StablecoinsResource,
    TvlResource,
    VolumesResource,
    YieldsResource,
)


class DefiLlama:
    """Client for the DefiLlama free and Pro APIs.

    All resources share one dispatcher, which holds only immutable
    configuration, so a single client may serve concurrent calls.

    Attributes:
        tvl: Protocol and chain TVL.
        prices: Token prices (coins host).
        stablecoins: Stablecoin market caps and dominance.
        yields: Yield pools, borrow rates, perps and LSD rates (Pro).
        volumes: DEX, options and derivatives volume.
        fees: Protocol fees and revenue.
        emissions: Token unlock schedules (Pro).
        bridges: Bridge volumes and transactions (Pro).
        ecosystem: Categories, forks, oracles, entities, treasuries, hacks, raises (Pro).
        etfs: Bitcoin/Ethereum ETF data and FDV performance (Pro).
        dat: Digital Asset Treasury institutional holdings (Pro).
        account: API usage for the configured key (Pro).
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Pro API key for premium endpoints. Get one at
                https://defillama.com/pro-api
            timeout_ms: Request timeout in milliseconds.
            debug: Print request diagnostics to stderr (API key redacted).
            transport: Optional httpx transport used for every request.
        """
        config = ClientConfig(api_key=api_key, timeout_ms=timeout_ms, debug=debug)
        self._client = DispatchClient(config, transport=transport)

        self.tvl = TvlResource(self._client)
        self.prices = PricesResource(self._client)
        self.stablecoins = StablecoinsResource(self._client)
        self.yields = YieldsResource(self._client)
        self.volumes = VolumesResource(self._client)
        self.fees = FeesResource(self._client)
        self.emissions = EmissionsResource(self._client)
        self.bridges = BridgesResource(self._client)
        self.ecosystem = EcosystemResource(self._client)
        self.etfs = EtfsResource(self._client)
        self.dat = DatResource(self._client)
        self.account = AccountResource(self._client)

    @classmethod
    def from_env(cls) -> "DefiLlama":
        """Create a client from environment variables.

        Optional environment variables:
            DEFILLAMA_API_KEY: Pro API key. Unset means free tier.
            DEFILLAMA_TIMEOUT_MS: Request timeout in milliseconds.
            DEFILLAMA_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured DefiLlama client.

        Raises:
            ValueError: DEFILLAMA_TIMEOUT_MS is not a valid integer.
        """
        api_key = os.environ.get("DEFILLAMA_API_KEY") or None
        timeout_ms = int(os.environ.get("DEFILLAMA_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        debug = os.environ.get("DEFILLAMA_DEBUG", "") == "1"
        return cls(api_key, timeout_ms=timeout_ms, debug=debug)

    @property
    def is_pro(self) -> bool:
        """Check if a Pro API key is configured."""
        return self._client.has_api_key
