"""Public models for the DefiLlama SDK.

Most endpoints return the decoded JSON payload untouched. Models live here
only where the SDK reshapes a response.
"""

from defillama_sdk.models.emissions import EmissionDetailResponse

__all__ = ["EmissionDetailResponse"]
