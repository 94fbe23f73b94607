"""HTTP client wrapping httpx with the credential and locale query parameters."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import SecretStr

from tenor_sdk.errors import TenorHTTPError, TenorNetworkError
from tenor_sdk.models.locale import Locale

DEFAULT_BASE_URL = "https://tenor.googleapis.com/v2"


class HTTPClient:
    """Async HTTP client for the Tenor REST API.

    Issues a single GET per call. Retries, rate limiting and connection reuse
    are left to the caller and to httpx.
    """

    def __init__(
        self,
        api_key: str | SecretStr,
        locale: Locale,
        country: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
        self._locale = locale
        self._country = country
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def country(self) -> str:
        return self._country

    def _params(self) -> dict[str, str]:
        return {
            "key": self._api_key.get_secret_value(),
            "country": self._country,
            "locale": self._locale.encode(),
        }

    def build_url(self, path: str, params: dict[str, Any] | None = None) -> httpx.URL:
        """The full request URL for ``path``, including key and locale."""
        return self._client.build_request("GET", path, params=self._merge(params)).url

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> httpx.Response:
        """GET ``path`` and return the response, raising on request errors or non-2xx."""
        request = self._client.build_request("GET", path, params=self._merge(params))
        try:
            response = await self._client.send(request)
        except httpx.RequestError as exc:
            raise TenorNetworkError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise TenorHTTPError.from_response(response)

        return response

    def _merge(self, params: dict[str, Any] | None) -> dict[str, Any]:
        merged: dict[str, Any] = self._params()
        if params:
            merged.update(params)
        return merged

    async def close(self) -> None:
        await self._client.aclose()
