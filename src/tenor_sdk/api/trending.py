"""Trending search terms API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tenor_sdk.api.base import fetch
from tenor_sdk.models.params import TrendingParameters
from tenor_sdk.models.trending import TrendingResponse

if TYPE_CHECKING:
    from tenor_sdk.http import HTTPClient


class TrendingAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def trending(self) -> TrendingResponse:
        return await fetch(self._http, "/trending_terms", TrendingResponse, label="fetch trending")

    async def trending_with_parameters(self, params: TrendingParameters) -> TrendingResponse:
        return await fetch(
            self._http, "/trending_terms", TrendingResponse, params=params.to_query(), label="fetch trending"
        )
