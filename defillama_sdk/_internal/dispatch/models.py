"""Pydantic models and routing constants for the request dispatcher."""

from enum import Enum, StrEnum
from typing import Any
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Constants
# =============================================================================

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_NAMESPACE = "api"

FREE_HOST = "https://api.llama.fi"
PRO_HOST = "https://pro-api.llama.fi"
COINS_HOST = "https://coins.llama.fi"
STABLECOINS_HOST = "https://stablecoins.llama.fi"

# Characters left unescaped by JavaScript's encodeURIComponent, on top of the
# ones urllib.parse.quote never escapes.
_SEGMENT_SAFE = "!*'()"

QueryValue = str | int | float | bool | None


class BaseUrl(StrEnum):
    """Routing target selecting which base host a request is sent to."""

    MAIN = "main"
    V2 = "v2"
    BRIDGES = "bridges"
    COINS = "coins"
    STABLECOINS = "stablecoins"


# =============================================================================
# Configuration
# =============================================================================


class ClientConfig(BaseModel):
    """Immutable client configuration.

    Fields:
        api_key: Pro API key. None means free-tier mode.
        timeout_ms: Per-request timeout in milliseconds.
        debug: Print request diagnostics to stderr.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    debug: bool = False

    @field_validator("api_key")
    @classmethod
    def empty_key_is_none(cls, v: str | None) -> str | None:
        return v or None


# =============================================================================
# Endpoint Request
# =============================================================================


class EndpointRequest(BaseModel):
    """A logical endpoint call before it is resolved to a concrete URL.

    Fields:
        path: Endpoint path, starting with "/".
        params: Query parameters. None values are dropped when encoding.
        requires_auth: Whether the endpoint needs the Pro API key.
        base: Routing target.
        namespace: Path segment between the key and the path on the Pro
            host for main-routed endpoints. Empty string omits it.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    params: dict[str, Any] | None = None
    requires_auth: bool = False
    base: BaseUrl = BaseUrl.MAIN
    namespace: str = DEFAULT_NAMESPACE

    @property
    def needs_api_key(self) -> bool:
        """v2 and bridges live on the Pro host, whatever requires_auth says."""
        if self.base in (BaseUrl.V2, BaseUrl.BRIDGES):
            return True
        if self.base in (BaseUrl.COINS, BaseUrl.STABLECOINS):
            return False
        return self.requires_auth

    def query_string(self) -> str:
        """Encode params in insertion order, skipping None values."""
        if not self.params:
            return ""
        pairs = [
            (key, stringify_param(value))
            for key, value in self.params.items()
            if value is not None
        ]
        return urlencode(pairs)


# =============================================================================
# Encoding Helpers
# =============================================================================


def stringify_param(value: Any) -> str:
    """Render a scalar query value the way the API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def quote_segment(segment: str | int) -> str:
    """Percent-encode a user-supplied path segment."""
    return quote(str(segment), safe=_SEGMENT_SAFE)
