"""Shared configuration for entity models."""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Immutable API entity.

    Unknown fields are ignored so new API attributes do not break decoding.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
