"""Request dispatcher shared by every DefiLlama resource."""

import asyncio
import re
import sys
from typing import Any

import httpx

from defillama_sdk._internal.dispatch.models import (
    COINS_HOST,
    DEFAULT_NAMESPACE,
    FREE_HOST,
    PRO_HOST,
    STABLECOINS_HOST,
    BaseUrl,
    ClientConfig,
    EndpointRequest,
)
from defillama_sdk._internal.dispatch.redaction import redact_api_key
from defillama_sdk._internal.http import create_http_client
from defillama_sdk.exceptions import (
    ApiError,
    ApiKeyRequiredError,
    NotFoundError,
    RateLimitError,
)

JSON_HEADERS = {"Accept": "application/json"}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class DispatchClient:
    """Single point of URL construction, request execution and error
    classification for every resource.

    The client holds nothing but its frozen ClientConfig, so one instance is
    shared by all resources and may serve concurrent calls. Each call opens
    its own short-lived httpx.AsyncClient and its own timeout scope.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            config: Client configuration. Defaults to free tier, 30s timeout.
            transport: Optional httpx transport used for every request.
        """
        self._config = config or ClientConfig()
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def has_api_key(self) -> bool:
        """Check if a Pro API key is configured."""
        return self._config.api_key is not None

    @property
    def api_key(self) -> str | None:
        """Raw API key, for endpoints that embed it outside the usual layout."""
        return self._config.api_key

    @property
    def timeout_seconds(self) -> float:
        return self._config.timeout_ms / 1000

    @property
    def transport(self) -> httpx.AsyncBaseTransport | None:
        return self._transport

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(
                f"[defillama-sdk] {redact_api_key(message, self.api_key)}",
                file=sys.stderr,
            )

    # =========================================================================
    # URL Resolution
    # =========================================================================

    def resolve_url(
        self,
        path: str,
        *,
        requires_auth: bool = False,
        base: BaseUrl = BaseUrl.MAIN,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> str:
        """Resolve an endpoint path against its routing target.

        Raises:
            ApiKeyRequiredError: The target needs the Pro key and none is set.
        """
        return self._resolve(
            EndpointRequest(
                path=path,
                requires_auth=requires_auth,
                base=base,
                namespace=namespace,
            )
        )

    def _resolve(self, request: EndpointRequest) -> str:
        if request.needs_api_key and not self.has_api_key:
            raise ApiKeyRequiredError(request.path)

        key = self._config.api_key
        if request.base == BaseUrl.V2:
            url = f"{PRO_HOST}/{key}/api/v2{request.path}"
        elif request.base == BaseUrl.BRIDGES:
            url = f"{PRO_HOST}/{key}/bridges{request.path}"
        elif request.base == BaseUrl.COINS:
            url = f"{COINS_HOST}{request.path}"
        elif request.base == BaseUrl.STABLECOINS:
            url = f"{STABLECOINS_HOST}{request.path}"
        elif request.requires_auth:
            namespace = f"/{request.namespace}" if request.namespace else ""
            url = f"{PRO_HOST}/{key}{namespace}{request.path}"
        else:
            url = f"{FREE_HOST}{request.path}"

        query = request.query_string()
        return f"{url}?{query}" if query else url

    # =========================================================================
    # Requests
    # =========================================================================

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        requires_auth: bool = False,
        base: BaseUrl = BaseUrl.MAIN,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> Any:
        """Send a GET request and return the decoded JSON payload.

        Args:
            path: Endpoint path, e.g. "/protocol/aave".
            params: Query parameters. None values are omitted.
            requires_auth: Whether the endpoint needs the Pro API key.
            base: Routing target.
            namespace: Pro-host namespace segment for main-routed endpoints.

        Returns:
            The decoded JSON body, untouched.

        Raises:
            ApiKeyRequiredError: No API key for a Pro endpoint.
            NotFoundError: HTTP 404.
            RateLimitError: HTTP 429.
            ApiError: Any other non-2xx response.
            TimeoutError: The configured timeout elapsed.
            httpx.RequestError: The request could not be completed.
        """
        request = EndpointRequest(
            path=path,
            params=params,
            requires_auth=requires_auth,
            base=base,
            namespace=namespace,
        )
        url = self._resolve(request)
        return await self._send("GET", url, request.path, headers=JSON_HEADERS)

    async def post(
        self,
        path: str,
        body: Any,
        *,
        requires_auth: bool = False,
        base: BaseUrl = BaseUrl.MAIN,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> Any:
        """Send a JSON POST request and return the decoded JSON payload.

        Routing, timeout and error classification match get(). Query
        parameters are not supported on this path.
        """
        request = EndpointRequest(
            path=path,
            requires_auth=requires_auth,
            base=base,
            namespace=namespace,
        )
        url = self._resolve(request)
        return await self._send(
            "POST",
            url,
            request.path,
            headers={**JSON_HEADERS, "Content-Type": "application/json"},
            json_body=body,
        )

    async def _send(
        self,
        method: str,
        url: str,
        path: str,
        *,
        headers: dict[str, str],
        json_body: Any = None,
    ) -> Any:
        """Run one request inside its own timeout scope and classify it."""
        self._log_debug(f"{method} {url}")
        try:
            async with asyncio.timeout(self.timeout_seconds):
                async with create_http_client(
                    timeout=self.timeout_seconds, transport=self._transport
                ) as client:
                    if method == "POST":
                        response = await client.post(url, headers=headers, json=json_body)
                    else:
                        response = await client.get(url, headers=headers)
                    return self._handle_response(response, path)
        except TimeoutError:
            self._log_debug(f"{method} {path} timed out after {self._config.timeout_ms}ms")
            raise

    def _handle_response(self, response: httpx.Response, path: str) -> Any:
        """Classify an HTTP response into a payload or a DefiLlamaError."""
        if response.is_success:
            self._log_debug(f"{path} -> {response.status_code}")
            return response.json()

        self._log_debug(f"{path} failed with status {response.status_code}")

        if response.status_code == 404:
            raise NotFoundError(path)

        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))

        error_body: Any
        try:
            error_body = response.json()
        except ValueError:
            error_body = response.text

        raise ApiError(
            response.status_code,
            f"API request failed: {response.reason_phrase}",
            error_body,
        )


def _parse_retry_after(value: str | None) -> int | None:
    """Parse the leading integer of a Retry-After header, like 7 for "7.5"."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None
