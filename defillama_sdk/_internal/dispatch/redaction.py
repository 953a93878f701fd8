"""Redaction of the Pro API key from URLs and diagnostic messages.

The Pro host takes the API key as a path segment, so any URL that is logged
or echoed back to the caller must go through redact_api_key first.
"""

REDACTED_VALUE = "[REDACTED]"


def redact_api_key(text: str, api_key: str | None) -> str:
    """Replace every occurrence of the API key in text.

    Args:
        text: A URL or message that may embed the key.
        api_key: The configured key. None or empty leaves text unchanged.

    Returns:
        The text with the key replaced by "[REDACTED]".
    """
    if not api_key:
        return text
    return text.replace(api_key, REDACTED_VALUE)
