"""DEX, options and derivatives volume endpoints."""

from typing import Any

from defillama_sdk._internal.dispatch import BaseUrl
from defillama_sdk.constants import VolumeDataType
from defillama_sdk.resources._base import Resource, quote_segment


def _overview_params(
    exclude_total_data_chart: bool | None,
    exclude_total_data_chart_breakdown: bool | None,
) -> dict[str, Any]:
    # The breakdown chart is large; it is excluded unless explicitly requested.
    return {
        "excludeTotalDataChart": exclude_total_data_chart,
        "excludeTotalDataChartBreakdown": exclude_total_data_chart_breakdown is not False,
    }


class VolumesResource(Resource):
    """Trading volume for DEXs, options and derivatives.

    Overview and summary endpoints are free; derivatives and the v2 metrics
    endpoints require a Pro API key.
    """

    async def get_dex_overview(
        self,
        *,
        exclude_total_data_chart: bool | None = None,
        exclude_total_data_chart_breakdown: bool | None = None,
        data_type: VolumeDataType | str | None = None,
    ) -> dict[str, Any]:
        """Get aggregated DEX volume with per-protocol breakdown.

        Args:
            exclude_total_data_chart: Drop the total volume chart.
            exclude_total_data_chart_breakdown: Drop the per-protocol chart.
                Defaults to True; pass False to include it.
            data_type: "dailyVolume" or "totalVolume".
        """
        params = _overview_params(exclude_total_data_chart, exclude_total_data_chart_breakdown)
        params["dataType"] = data_type or None
        return await self._client.get("/overview/dexs", params=params)

    async def get_dex_overview_by_chain(
        self,
        chain: str,
        *,
        exclude_total_data_chart: bool | None = None,
        exclude_total_data_chart_breakdown: bool | None = None,
    ) -> dict[str, Any]:
        """Get DEX volume overview for one chain."""
        return await self._client.get(
            f"/overview/dexs/{quote_segment(chain)}",
            params=_overview_params(exclude_total_data_chart, exclude_total_data_chart_breakdown),
        )

    async def get_dex_summary(
        self, protocol: str, *, data_type: VolumeDataType | str | None = None
    ) -> dict[str, Any]:
        """Get volume summary and history for one DEX."""
        return await self._client.get(
            f"/summary/dexs/{quote_segment(protocol)}",
            params={"dataType": data_type or None},
        )

    async def get_options_overview(
        self,
        *,
        exclude_total_data_chart: bool | None = None,
        exclude_total_data_chart_breakdown: bool | None = None,
    ) -> dict[str, Any]:
        """Get aggregated options volume."""
        return await self._client.get(
            "/overview/options",
            params=_overview_params(exclude_total_data_chart, exclude_total_data_chart_breakdown),
        )

    async def get_options_overview_by_chain(self, chain: str) -> dict[str, Any]:
        return await self._client.get(f"/overview/options/{quote_segment(chain)}")

    async def get_options_summary(self, protocol: str) -> dict[str, Any]:
        return await self._client.get(f"/summary/options/{quote_segment(protocol)}")

    async def get_derivatives_overview(self) -> dict[str, Any]:
        """Get aggregated perpetuals/derivatives volume. Requires a Pro API key."""
        return await self._client.get("/overview/derivatives", requires_auth=True)

    async def get_derivatives_summary(self, protocol: str) -> dict[str, Any]:
        """Get derivatives volume for one protocol. Requires a Pro API key."""
        return await self._client.get(
            f"/summary/derivatives/{quote_segment(protocol)}",
            requires_auth=True,
        )

    # =========================================================================
    # v2 Metrics (Pro)
    # =========================================================================

    async def _metrics(self, path: str, data_type: VolumeDataType | str | None) -> Any:
        return await self._client.get(
            path,
            base=BaseUrl.V2,
            requires_auth=True,
            params={"dataType": data_type or None},
        )

    async def get_dex_metrics(
        self, *, data_type: VolumeDataType | str | None = None
    ) -> dict[str, Any]:
        """Get DEX volume metrics (24h, 7d, 30d totals and changes)."""
        return await self._metrics("/metrics/dexs", data_type)

    async def get_dex_metrics_by_protocol(
        self, protocol: str, *, data_type: VolumeDataType | str | None = None
    ) -> dict[str, Any]:
        return await self._metrics(f"/metrics/dexs/protocol/{quote_segment(protocol)}", data_type)

    async def get_derivatives_metrics(
        self, *, data_type: VolumeDataType | str | None = None
    ) -> dict[str, Any]:
        return await self._metrics("/metrics/derivatives", data_type)

    async def get_derivatives_metrics_by_protocol(
        self, protocol: str, *, data_type: VolumeDataType | str | None = None
    ) -> dict[str, Any]:
        return await self._metrics(
            f"/metrics/derivatives/protocol/{quote_segment(protocol)}", data_type
        )

    async def get_options_metrics(
        self, *, data_type: VolumeDataType | str | None = None
    ) -> dict[str, Any]:
        return await self._metrics("/metrics/options", data_type)

    async def get_options_metrics_by_protocol(
        self, protocol: str, *, data_type: VolumeDataType | str | None = None
    ) -> dict[str, Any]:
        return await self._metrics(
            f"/metrics/options/protocol/{quote_segment(protocol)}", data_type
        )
