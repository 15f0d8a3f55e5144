"""
Album Catalog Backend — Pydantic Request/Response Schemas
==========================================================

What:  Pydantic models defining the JSON contract of the catalog API.
How:   FastAPI binds request bodies to these models, serializes responses
       through them, and generates the OpenAPI document from them.

Decoding rules for Album:
    - Missing fields take their zero value ("" for strings, 0.0 for price)
    - A JSON null leaves the field at its zero value
    - Keys match field names case-insensitively ("ID" binds to `id`);
      when several keys map to one field the last one wins
    - Unknown fields are ignored
    - Wrong JSON types are rejected (strict mode): a number for `year`
      or a string for `price` fails decoding. Integers are accepted for
      `price`; NaN and infinities are not.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


# ══════════════════════════════════════════════════════════════════════════
# Album: the single record type
# ══════════════════════════════════════════════════════════════════════════


class Album(BaseModel):
    """
    What:  Data about a record album.
    Who:   Request body of POST /albums; response of every /albums endpoint.

    `id` is supplied by the client and is not checked for uniqueness.
    """
    id: str = Field(default="", description="Client-supplied album identifier")
    title: str = Field(default="", description="Album title")
    artist: str = Field(default="", description="Recording artist")
    year: str = Field(default="", description="Release year, transmitted as a string")
    # 1e400 parses to inf, and Starlette's json.loads accepts NaN/Infinity literals
    price: float = Field(
        default=0.0,
        allow_inf_nan=False,
        description="Price as a finite floating-point number",
    )

    @model_validator(mode="before")
    @classmethod
    def bind_json_keys(cls, data: Any) -> Any:
        """Fold key case onto field names and drop nulls before field validation."""
        if not isinstance(data, dict):
            return data
        field_names = {name.casefold(): name for name in cls.model_fields}
        bound: Dict[Any, Any] = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = field_names.get(key.casefold(), key)
            if value is None:
                continue
            bound[key] = value
        return bound

    model_config = {
        "strict": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "4",
                    "title": "Test Album",
                    "artist": "Test Artist",
                    "year": "2023",
                    "price": 29.99,
                }
            ]
        },
    }


# ══════════════════════════════════════════════════════════════════════════
# Message & Error Models
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Single-message body, e.g. {"message": "pong"} or {"message": "album not found"}."""
    message: str = Field(description="Human-readable message")


class ErrorResponse(BaseModel):
    """
    What:  Error body for 4xx/5xx responses.

    `details` is present only for decoding failures, where it lists the
    per-field errors reported by pydantic. The request id travels in the
    X-Request-ID response header rather than the body.

    Example:
        {
            "message": "invalid album payload",
            "details": [{"loc": ["body", "price"], "msg": "Input should be a valid number", ...}]
        }
    """
    message: str = Field(description="Human-readable error description")
    details: Optional[List[Any]] = Field(default=None, description="Per-field decoding errors")


class HealthResponse(BaseModel):
    """Health check response returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    album_count: int = Field(description="Number of albums currently in the collection")
    uptime_seconds: float = Field(description="Seconds since service started")
