"""Tests for DatResource."""

import httpx
import pytest
import respx

from defillama_sdk import ApiKeyRequiredError, DefiLlama

ROOT = "https://pro-api.llama.fi/test-key"


class TestDat:
    """Tests for DAT endpoints."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_institutions(self):
        """Should sit directly under the key with no namespace."""
        route = respx.get(f"{ROOT}/dat/institutions").mock(
            return_value=httpx.Response(200, json={"institutions": []})
        )
        await DefiLlama("test-key").dat.get_institutions()
        assert route.calls.last.request.url.path == "/test-key/dat/institutions"

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_institution(self):
        """Should hit the per-institution path."""
        route = respx.get(f"{ROOT}/dat/institutions/MSTR").mock(
            return_value=httpx.Response(200, json={"symbol": "MSTR"})
        )
        assert await DefiLlama("test-key").dat.get_institution("MSTR") == {"symbol": "MSTR"}
        assert route.called

    @pytest.mark.asyncio
    async def test_requires_key(self):
        """Should fail fast without a key."""
        with pytest.raises(ApiKeyRequiredError):
            await DefiLlama().dat.get_institutions()
