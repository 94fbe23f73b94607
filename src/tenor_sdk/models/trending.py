from __future__ import annotations

from tenor_sdk.models.base import TenorModel


class TrendingResponse(TenorModel):
    locale: str
    results: list[str]
