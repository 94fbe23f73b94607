"""Search API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tenor_sdk.api.base import fetch
from tenor_sdk.models.params import SearchParameters
from tenor_sdk.models.search import SearchResponse

if TYPE_CHECKING:
    from tenor_sdk.http import HTTPClient


class SearchAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def search(self, query: str) -> SearchResponse:
        return await fetch(self._http, "/search", SearchResponse, params={"q": query}, label="search query")

    async def search_with_parameters(self, query: str, params: SearchParameters) -> SearchResponse:
        return await fetch(
            self._http,
            "/search",
            SearchResponse,
            params={"q": query, **params.to_query()},
            label="search query",
        )
