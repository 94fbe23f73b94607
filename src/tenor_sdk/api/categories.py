"""Categories API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tenor_sdk.api.base import fetch
from tenor_sdk.models.categories import CategoriesResponse
from tenor_sdk.models.params import CategoriesParameters

if TYPE_CHECKING:
    from tenor_sdk.http import HTTPClient


class CategoriesAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def categories(self) -> CategoriesResponse:
        return await fetch(self._http, "/categories", CategoriesResponse, label="fetch categories")

    async def categories_with_parameters(self, params: CategoriesParameters) -> CategoriesResponse:
        return await fetch(
            self._http, "/categories", CategoriesResponse, params=params.to_query(), label="fetch categories"
        )
