"""Base model shared by every SDK model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TenorModel(BaseModel):
    """Immutable snapshot of one JSON payload.

    Unknown fields from the API are ignored so new response keys don't break
    older SDK releases.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
