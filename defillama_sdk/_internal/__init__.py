"""Internal modules for DefiLlama SDK.

WARNING: This package contains modules shared by the public resources.
These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatcher (URL routing, timeouts, error classification)
    http - Shared HTTP client configuration
"""
