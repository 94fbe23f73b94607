"""Featured content API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tenor_sdk.api.base import fetch
from tenor_sdk.models.params import FeaturedParameters
from tenor_sdk.models.search import SearchResponse

if TYPE_CHECKING:
    from tenor_sdk.http import HTTPClient


class FeaturedAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def featured(self) -> SearchResponse:
        return await fetch(self._http, "/featured", SearchResponse, label="fetch featured")

    async def featured_with_parameters(self, params: FeaturedParameters) -> SearchResponse:
        return await fetch(
            self._http, "/featured", SearchResponse, params=params.to_query(), label="fetch featured"
        )
