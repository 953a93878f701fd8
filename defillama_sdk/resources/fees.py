"""Protocol fees and revenue endpoints."""

from typing import Any

from defillama_sdk._internal.dispatch import BaseUrl
from defillama_sdk.constants import FeeDataType
from defillama_sdk.resources._base import Resource, quote_segment


class FeesResource(Resource):
    """Fees and revenue by protocol and chain.

    The overview and summary endpoints are free. Charts and metrics are
    served from the Pro v2 API and require an API key.

    Example:
        overview = await client.fees.get_overview(data_type=FeeDataType.DAILY_REVENUE)
    """

    async def get_overview(
        self,
        *,
        exclude_total_data_chart: bool | None = None,
        exclude_total_data_chart_breakdown: bool | None = None,
        data_type: FeeDataType | str | None = None,
    ) -> dict[str, Any]:
        """Get fees across all protocols.

        Args:
            exclude_total_data_chart: Drop the total fees chart.
            exclude_total_data_chart_breakdown: Drop the per-protocol chart.
            data_type: Metric to report, e.g. "dailyFees" or "dailyRevenue".
        """
        return await self._client.get(
            "/overview/fees",
            params={
                "excludeTotalDataChart": exclude_total_data_chart,
                "excludeTotalDataChartBreakdown": exclude_total_data_chart_breakdown,
                "dataType": data_type or None,
            },
        )

    async def get_overview_by_chain(
        self,
        chain: str,
        *,
        exclude_total_data_chart: bool | None = None,
        exclude_total_data_chart_breakdown: bool | None = None,
        data_type: FeeDataType | str | None = None,
    ) -> dict[str, Any]:
        """Get fees across all protocols on one chain."""
        return await self._client.get(
            f"/overview/fees/{quote_segment(chain)}",
            params={
                "excludeTotalDataChart": exclude_total_data_chart,
                "excludeTotalDataChartBreakdown": exclude_total_data_chart_breakdown,
                "dataType": data_type or None,
            },
        )

    async def get_summary(
        self, protocol: str, *, data_type: FeeDataType | str | None = None
    ) -> dict[str, Any]:
        """Get fees summary and history for one protocol."""
        return await self._client.get(
            f"/summary/fees/{quote_segment(protocol)}",
            params={"dataType": data_type or None},
        )

    # =========================================================================
    # v2 Charts and Metrics (Pro)
    # =========================================================================

    async def _v2(self, path: str, data_type: FeeDataType | str | None) -> Any:
        return await self._client.get(
            path,
            base=BaseUrl.V2,
            requires_auth=True,
            params={"dataType": data_type or None},
        )

    async def get_chart(
        self, *, data_type: FeeDataType | str | None = None
    ) -> list[list[Any]]:
        """Get the total fees time series as [timestamp, value] pairs."""
        return await self._v2("/chart/fees", data_type)

    async def get_chart_by_chain(
        self, chain: str, *, data_type: FeeDataType | str | None = None
    ) -> list[list[Any]]:
        return await self._v2(f"/chart/fees/chain/{quote_segment(chain)}", data_type)

    async def get_chart_by_protocol(
        self, protocol: str, *, data_type: FeeDataType | str | None = None
    ) -> list[list[Any]]:
        return await self._v2(f"/chart/fees/protocol/{quote_segment(protocol)}", data_type)

    async def get_chart_by_protocol_chain_breakdown(
        self, protocol: str, *, data_type: FeeDataType | str | None = None
    ) -> list[list[Any]]:
        """Get a protocol's fees time series broken down by chain."""
        return await self._v2(
            f"/chart/fees/protocol/{quote_segment(protocol)}/chain-breakdown", data_type
        )

    async def get_chart_by_protocol_version_breakdown(
        self, protocol: str, *, data_type: FeeDataType | str | None = None
    ) -> list[list[Any]]:
        """Get a protocol's fees time series broken down by version (v2, v3, ...)."""
        return await self._v2(
            f"/chart/fees/protocol/{quote_segment(protocol)}/version-breakdown", data_type
        )

    async def get_chart_by_chain_protocol_breakdown(
        self, chain: str, *, data_type: FeeDataType | str | None = None
    ) -> list[list[Any]]:
        """Get a chain's fees time series broken down by protocol."""
        return await self._v2(
            f"/chart/fees/chain/{quote_segment(chain)}/protocol-breakdown", data_type
        )

    async def get_chart_chain_breakdown(
        self, *, data_type: FeeDataType | str | None = None
    ) -> list[list[Any]]:
        return await self._v2("/chart/fees/chain-breakdown", data_type)

    async def get_metrics(
        self, *, data_type: FeeDataType | str | None = None
    ) -> dict[str, Any]:
        """Get fees metrics (24h, 7d, 30d totals and changes) for all protocols."""
        return await self._v2("/metrics/fees", data_type)

    async def get_metrics_by_chain(
        self, chain: str, *, data_type: FeeDataType | str | None = None
    ) -> dict[str, Any]:
        return await self._v2(f"/metrics/fees/chain/{quote_segment(chain)}", data_type)

    async def get_metrics_by_protocol(
        self, protocol: str, *, data_type: FeeDataType | str | None = None
    ) -> dict[str, Any]:
        return await self._v2(f"/metrics/fees/protocol/{quote_segment(protocol)}", data_type)
