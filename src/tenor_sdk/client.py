"""High-level Tenor client composing HTTP and the endpoint API groups."""

from __future__ import annotations

import os
from typing import Any

import httpx
from pydantic import SecretStr

from tenor_sdk.api.categories import CategoriesAPI
from tenor_sdk.api.featured import FeaturedAPI
from tenor_sdk.api.search import SearchAPI
from tenor_sdk.api.trending import TrendingAPI
from tenor_sdk.http import DEFAULT_BASE_URL, HTTPClient
from tenor_sdk.models.categories import CategoriesResponse
from tenor_sdk.models.locale import Locale, check_country
from tenor_sdk.models.params import (
    CategoriesParameters,
    FeaturedParameters,
    SearchParameters,
    TrendingParameters,
)
from tenor_sdk.models.search import SearchResponse
from tenor_sdk.models.trending import TrendingResponse


class Tenor:
    """Top-level SDK client.

    Holds the API key and default locale for its whole lifetime; nothing on
    it changes after construction, so one instance can serve many concurrent
    calls.

    Usage::

        async with Tenor(api_key, Locale("ja", "JP")) as tenor:
            page = await tenor.search("excited")
            more = await tenor.search_with_parameters(
                "excited", SearchParameters().next_page(page)
            )
    """

    def __init__(
        self,
        api_key: str | SecretStr,
        locale: Locale | None = None,
        *,
        country: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if locale is None:
            locale = Locale()
        self._http = HTTPClient(
            api_key,
            locale,
            check_country(country) if country else locale.country,
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )
        self._search = SearchAPI(self._http)
        self._featured = FeaturedAPI(self._http)
        self._categories = CategoriesAPI(self._http)
        self._trending = TrendingAPI(self._http)

    @classmethod
    def from_env(cls, **kwargs: Any) -> Tenor:
        """Build from ``TENOR_API_KEY`` and the optional ``TENOR_LOCALE`` (e.g. ``ja_JP``)."""
        try:
            api_key = os.environ["TENOR_API_KEY"]
        except KeyError:
            raise RuntimeError("TENOR_API_KEY is not set") from None
        locale = os.environ.get("TENOR_LOCALE")
        return cls(api_key, Locale.parse(locale) if locale else None, **kwargs)

    @property
    def http(self) -> HTTPClient:
        return self._http

    @property
    def locale(self) -> Locale:
        return self._http.locale

    @property
    def country(self) -> str:
        return self._http.country

    def __repr__(self) -> str:
        return f"Tenor(locale={self.locale}, country={self.country})"

    # --- Search ---

    async def search(self, query: str) -> SearchResponse:
        return await self._search.search(query)

    async def search_with_parameters(self, query: str, params: SearchParameters) -> SearchResponse:
        return await self._search.search_with_parameters(query, params)

    # --- Featured ---

    async def featured(self) -> SearchResponse:
        return await self._featured.featured()

    async def featured_with_parameters(self, params: FeaturedParameters) -> SearchResponse:
        return await self._featured.featured_with_parameters(params)

    # --- Categories ---

    async def categories(self) -> CategoriesResponse:
        return await self._categories.categories()

    async def categories_with_parameters(self, params: CategoriesParameters) -> CategoriesResponse:
        return await self._categories.categories_with_parameters(params)

    # --- Trending terms ---

    async def trending(self) -> TrendingResponse:
        return await self._trending.trending()

    async def trending_with_parameters(self, params: TrendingParameters) -> TrendingResponse:
        return await self._trending.trending_with_parameters(params)

    # --- Context manager ---

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> Tenor:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
