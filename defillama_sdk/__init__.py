"""DefiLlama SDK for Python.

Async client for the DefiLlama free and Pro APIs: TVL, prices, stablecoins,
yields, volumes, fees, emissions, bridges, ecosystem, ETFs, DAT and account
usage.

Public API:
    DefiLlama - User-facing client
    exceptions - DefiLlamaError and its subclasses
    constants - AdapterType, FeeDataType, VolumeDataType

Internal (not for direct use):
    _internal.dispatch - Request dispatcher
"""

from defillama_sdk._version import __version__
from defillama_sdk.client import DefiLlama
from defillama_sdk.constants import (
    DATA_TYPE_SHORT_KEYS,
    AdapterType,
    FeeDataType,
    VolumeDataType,
)
from defillama_sdk.exceptions import (
    ApiError,
    ApiKeyRequiredError,
    DefiLlamaConfigError,
    DefiLlamaError,
    DefiLlamaValidationError,
    NotFoundError,
    RateLimitError,
)
from defillama_sdk.models import EmissionDetailResponse

__all__ = [
    "__version__",
    "DefiLlama",
    "AdapterType",
    "FeeDataType",
    "VolumeDataType",
    "DATA_TYPE_SHORT_KEYS",
    "DefiLlamaError",
    "ApiKeyRequiredError",
    "NotFoundError",
    "RateLimitError",
    "ApiError",
    "DefiLlamaConfigError",
    "DefiLlamaValidationError",
    "EmissionDetailResponse",
]
