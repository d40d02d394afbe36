"""
Pydantic models for album data.

``Album`` is the single record type of the service and is used both
for request bodies and responses.  Decoding mirrors the original
album server's JSON binder:

* a field carrying the wrong JSON type (a string ``price``, a numeric
  ``id``) is rejected, while integers are accepted for ``price``;
* ``price`` must be finite, so ``NaN``, ``Infinity`` and overflowing
  literals such as ``1e400`` are rejected;
* keys match field names case-insensitively, and when several keys
  map to one field the last one wins;
* absent fields and ``null`` values leave the field at its zero value;
* unknown keys are ignored.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, StrictFloat, StrictStr, model_validator


class Album(BaseModel):
    """A record album."""

    id: StrictStr = Field("", examples=["1"])
    title: StrictStr = Field("", examples=["Blue Train"])
    artist: StrictStr = Field("", examples=["John Coltrane"])
    price: StrictFloat = Field(0.0, allow_inf_nan=False, examples=[56.99])

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        folded: Dict[str, Any] = {}
        for key, value in data.items():
            name = key.lower() if isinstance(key, str) else key
            if name not in cls.model_fields:
                continue
            # null keeps whatever the field already holds.
            if value is None:
                continue
            folded[name] = value
        return folded


class Message(BaseModel):
    """Plain message body, e.g. ``{"message": "album not found"}``."""

    message: str


class ValidationErrorMessage(Message):
    """Body returned when a request payload cannot be decoded."""

    errors: List[Dict[str, Any]] = Field(default_factory=list)
