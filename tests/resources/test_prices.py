"""Tests for PricesResource."""

import json

import httpx
import pytest
import respx

from defillama_sdk import DefiLlama

COINS = "https://coins.llama.fi"
ETH = "coingecko:ethereum"
USDC = "ethereum:0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


class TestPrices:
    """Tests for price endpoints on the coins host."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_current_prices(self):
        """Should join coins with commas and need no key."""
        route = respx.get(f"{COINS}/prices/current/{ETH},{USDC}").mock(
            return_value=httpx.Response(200, json={"coins": {ETH: {"price": 3000.0}}})
        )
        result = await DefiLlama().prices.get_current_prices([ETH, USDC])
        assert result["coins"][ETH]["price"] == 3000.0
        assert route.calls.last.request.url.query == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_current_prices_search_width(self):
        """Should forward searchWidth."""
        route = respx.get(f"{COINS}/prices/current/{ETH}").mock(
            return_value=httpx.Response(200, json={"coins": {}})
        )
        await DefiLlama().prices.get_current_prices([ETH], search_width="4h")
        assert route.calls.last.request.url.params["searchWidth"] == "4h"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_current_prices_single_string(self):
        """Should treat a bare string as one coin rather than its characters."""
        route = respx.get(f"{COINS}/prices/current/{ETH}").mock(
            return_value=httpx.Response(200, json={"coins": {}})
        )
        await DefiLlama().prices.get_current_prices(ETH)
        assert route.calls.last.request.url.path == f"/prices/current/{ETH}"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_current_prices_empty_search_width(self):
        """Should omit an empty searchWidth."""
        route = respx.get(f"{COINS}/prices/current/{ETH}").mock(
            return_value=httpx.Response(200, json={"coins": {}})
        )
        await DefiLlama().prices.get_current_prices([ETH], search_width="")
        assert route.calls.last.request.url.query == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_historical_prices_empty_search_width(self):
        """Should omit an empty searchWidth on historical lookups."""
        route = respx.get(f"{COINS}/prices/historical/1648680149/{ETH}").mock(
            return_value=httpx.Response(200, json={"coins": {}})
        )
        await DefiLlama().prices.get_historical_prices(1648680149, ETH, search_width="")
        assert route.calls.last.request.url.query == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_historical_prices(self):
        """Should put the timestamp before the coins."""
        route = respx.get(f"{COINS}/prices/historical/1648680149/{ETH}").mock(
            return_value=httpx.Response(200, json={"coins": {}})
        )
        await DefiLlama().prices.get_historical_prices(1648680149, [ETH])
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_batch_historical_prices(self):
        """Should send the coin map as compact JSON."""
        route = respx.get(f"{COINS}/batchHistorical").mock(
            return_value=httpx.Response(200, json={"coins": {}})
        )
        coins = {ETH: [1666876743, 1666862343]}
        await DefiLlama().prices.get_batch_historical_prices(coins, search_width="600")

        params = route.calls.last.request.url.params
        assert json.loads(params["coins"]) == coins
        assert params["coins"] == '{"coingecko:ethereum":[1666876743,1666862343]}'
        assert params["searchWidth"] == "600"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_chart(self):
        """Should forward only the options that are set, in order."""
        route = respx.get(f"{COINS}/chart/{ETH}").mock(
            return_value=httpx.Response(200, json={"coins": {}})
        )
        await DefiLlama().prices.get_chart([ETH], start=1664364537, span=10, period="2d")
        assert str(route.calls.last.request.url) == (
            f"{COINS}/chart/{ETH}?start=1664364537&span=10&period=2d"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_percentage_change(self):
        """Should serialize lookForward as a lowercase boolean."""
        route = respx.get(f"{COINS}/percentage/{ETH}").mock(
            return_value=httpx.Response(200, json={"coins": {ETH: -1.2}})
        )
        await DefiLlama().prices.get_percentage_change([ETH], look_forward=False, period="3w")
        params = route.calls.last.request.url.params
        assert params["lookForward"] == "false"
        assert params["period"] == "3w"
        assert "timestamp" not in params

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_first_prices(self):
        """Should hit prices/first."""
        route = respx.get(f"{COINS}/prices/first/{ETH}").mock(
            return_value=httpx.Response(200, json={"coins": {}})
        )
        await DefiLlama().prices.get_first_prices([ETH])
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_block_at_timestamp(self):
        """Should return the block info untouched."""
        respx.get(f"{COINS}/block/ethereum/1700000000").mock(
            return_value=httpx.Response(200, json={"height": 18573180, "timestamp": 1699999991})
        )
        result = await DefiLlama().prices.get_block_at_timestamp("ethereum", 1700000000)
        assert result == {"height": 18573180, "timestamp": 1699999991}
