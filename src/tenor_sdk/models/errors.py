"""Tenor's JSON error envelope."""

from __future__ import annotations

from typing import Any

from tenor_sdk.models.base import TenorModel


class ErrorResponse(TenorModel):
    """Body of the ``error`` key Tenor returns with non-2xx responses."""

    code: int
    message: str
    status: str | None = None
    details: list[Any] = []
