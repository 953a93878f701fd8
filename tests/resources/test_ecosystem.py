"""Tests for EcosystemResource."""

import httpx
import pytest

from defillama_sdk import ApiKeyRequiredError, DefiLlama

PRO = "https://pro-api.llama.fi/test-key/api"


class TestEcosystem:
    """Tests for ecosystem endpoints."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get_categories", "/categories"),
            ("get_forks", "/forks"),
            ("get_oracles", "/oracles"),
            ("get_entities", "/entities"),
            ("get_treasuries", "/treasuries"),
            ("get_hacks", "/hacks"),
            ("get_raises", "/raises"),
        ],
    )
    async def test_endpoints(self, respx_mock, method, path):
        """Should hit the Pro host."""
        route = respx_mock.get(f"{PRO}{path}").mock(
            return_value=httpx.Response(200, json={"ok": True})
        )
        assert await getattr(DefiLlama("test-key").ecosystem, method)() == {"ok": True}
        assert route.called

    @pytest.mark.asyncio
    async def test_requires_key(self):
        """Should fail fast without a key."""
        with pytest.raises(ApiKeyRequiredError) as exc_info:
            await DefiLlama().ecosystem.get_hacks()
        assert exc_info.value.endpoint == "/hacks"
