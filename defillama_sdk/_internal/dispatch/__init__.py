"""Request dispatcher for the DefiLlama SDK.

WARNING: This is an internal module shared by every resource.
Do not call directly from user code; use defillama_sdk.DefiLlama.
"""

from defillama_sdk._internal.dispatch.client import DispatchClient
from defillama_sdk._internal.dispatch.models import (
    BaseUrl,
    ClientConfig,
    EndpointRequest,
    quote_segment,
)

__all__ = [
    "DispatchClient",
    "BaseUrl",
    "ClientConfig",
    "EndpointRequest",
    "quote_segment",
]
