"""Pydantic models for the emissions endpoints."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EmissionDetailResponse(BaseModel):
    """Vesting schedule and allocation detail for one protocol.

    The endpoint wraps the document in an envelope whose body is itself a
    JSON-encoded string; the validator decodes it so body is always the
    structured document.

    Fields:
        body: Decoded emission document (name, metadata, documentedData, ...).
        last_modified: Timestamp string from the envelope's lastModified.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    body: dict[str, Any]
    last_modified: str = Field(alias="lastModified")

    @field_validator("body", mode="before")
    @classmethod
    def decode_body(cls, v: Any) -> Any:
        if isinstance(v, str | bytes):
            try:
                return json.loads(v)
            except json.JSONDecodeError as e:
                raise ValueError(f"body is not valid JSON: {e.msg}") from e
        return v
