"""Tests for VolumesResource."""

import httpx
import pytest
import respx

from defillama_sdk import ApiKeyRequiredError, DefiLlama, VolumeDataType

FREE = "https://api.llama.fi"
PRO = "https://pro-api.llama.fi/test-key/api"
V2 = "https://pro-api.llama.fi/test-key/api/v2"


class TestVolumeOverviews:
    """Tests for free overview and summary endpoints."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_dex_overview_excludes_breakdown_by_default(self):
        """Should always send excludeTotalDataChartBreakdown, defaulting to true."""
        route = respx.get(f"{FREE}/overview/dexs").mock(
            return_value=httpx.Response(200, json={"protocols": []})
        )
        await DefiLlama().volumes.get_dex_overview()
        assert str(route.calls.last.request.url) == (
            f"{FREE}/overview/dexs?excludeTotalDataChartBreakdown=true"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_dex_overview_all_options(self):
        """Should forward every option in order."""
        route = respx.get(f"{FREE}/overview/dexs").mock(
            return_value=httpx.Response(200, json={"protocols": []})
        )
        await DefiLlama().volumes.get_dex_overview(
            exclude_total_data_chart=True,
            exclude_total_data_chart_breakdown=False,
            data_type=VolumeDataType.TOTAL_VOLUME,
        )
        assert str(route.calls.last.request.url) == (
            f"{FREE}/overview/dexs?excludeTotalDataChart=true"
            "&excludeTotalDataChartBreakdown=false&dataType=totalVolume"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_dex_overview_by_chain(self):
        """Should encode the chain."""
        route = respx.get(f"{FREE}/overview/dexs/BNB%20Chain").mock(
            return_value=httpx.Response(200, json={})
        )
        await DefiLlama().volumes.get_dex_overview_by_chain("BNB Chain")
        assert route.calls.last.request.url.params["excludeTotalDataChartBreakdown"] == "true"

    @pytest.mark.asyncio
    @respx.mock
    async def test_dex_summary(self):
        """Should forward dataType when given."""
        route = respx.get(f"{FREE}/summary/dexs/uniswap").mock(
            return_value=httpx.Response(200, json={})
        )
        await DefiLlama().volumes.get_dex_summary("uniswap", data_type="dailyVolume")
        assert route.calls.last.request.url.params["dataType"] == "dailyVolume"

    @pytest.mark.asyncio
    @respx.mock
    async def test_options_overview(self):
        """Should default the breakdown exclusion like dexs."""
        route = respx.get(f"{FREE}/overview/options").mock(return_value=httpx.Response(200, json={}))
        await DefiLlama().volumes.get_options_overview()
        assert route.calls.last.request.url.params["excludeTotalDataChartBreakdown"] == "true"

    @pytest.mark.asyncio
    @respx.mock
    async def test_options_by_chain_and_summary(self):
        """Should hit the options chain and summary paths without params."""
        chain = respx.get(f"{FREE}/overview/options/Ethereum").mock(
            return_value=httpx.Response(200, json={})
        )
        summary = respx.get(f"{FREE}/summary/options/lyra").mock(
            return_value=httpx.Response(200, json={})
        )
        client = DefiLlama()
        await client.volumes.get_options_overview_by_chain("Ethereum")
        await client.volumes.get_options_summary("lyra")
        assert chain.calls.last.request.url.query == b""
        assert summary.called


class TestDerivatives:
    """Tests for Pro derivatives endpoints."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_derivatives_overview(self):
        """Should hit the Pro host."""
        route = respx.get(f"{PRO}/overview/derivatives").mock(
            return_value=httpx.Response(200, json={})
        )
        await DefiLlama("test-key").volumes.get_derivatives_overview()
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_derivatives_summary(self):
        """Should hit the Pro summary path."""
        route = respx.get(f"{PRO}/summary/derivatives/hyperliquid").mock(
            return_value=httpx.Response(200, json={})
        )
        await DefiLlama("test-key").volumes.get_derivatives_summary("hyperliquid")
        assert route.called

    @pytest.mark.asyncio
    async def test_derivatives_require_key(self):
        """Should fail fast without a key."""
        with pytest.raises(ApiKeyRequiredError):
            await DefiLlama().volumes.get_derivatives_overview()


class TestVolumeMetrics:
    """Tests for v2 metrics endpoints."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "args", "path"),
        [
            ("get_dex_metrics", (), "/metrics/dexs"),
            ("get_dex_metrics_by_protocol", ("uniswap",), "/metrics/dexs/protocol/uniswap"),
            ("get_derivatives_metrics", (), "/metrics/derivatives"),
            (
                "get_derivatives_metrics_by_protocol",
                ("hyperliquid",),
                "/metrics/derivatives/protocol/hyperliquid",
            ),
            ("get_options_metrics", (), "/metrics/options"),
            ("get_options_metrics_by_protocol", ("lyra",), "/metrics/options/protocol/lyra"),
        ],
    )
    async def test_metrics(self, respx_mock, method, args, path):
        """Should hit the v2 API with dataType."""
        route = respx_mock.get(f"{V2}{path}").mock(return_value=httpx.Response(200, json={}))
        await getattr(DefiLlama("test-key").volumes, method)(*args, data_type="dailyVolume")
        assert route.calls.last.request.url.params["dataType"] == "dailyVolume"

    @pytest.mark.asyncio
    async def test_metrics_require_key(self):
        """Should fail fast without a key."""
        with pytest.raises(ApiKeyRequiredError) as exc_info:
            await DefiLlama().volumes.get_dex_metrics()
        assert exc_info.value.endpoint == "/metrics/dexs"
