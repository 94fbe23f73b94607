"""Tenor SDK — async Python client for the Tenor GIF and sticker API."""

from tenor_sdk.client import Tenor
from tenor_sdk.errors import TenorError, TenorHTTPError, TenorNetworkError, TenorSerializationError
from tenor_sdk.models.enums import ArRange, CategoryType, ContentFilter, MediaFilter, SearchFilter
from tenor_sdk.models.locale import Locale
from tenor_sdk.models.params import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    CategoriesParameters,
    FeaturedParameters,
    SearchParameters,
    TrendingParameters,
)

__all__ = [
    "Tenor",
    "Locale",
    "ArRange",
    "CategoryType",
    "ContentFilter",
    "MediaFilter",
    "SearchFilter",
    "SearchParameters",
    "FeaturedParameters",
    "CategoriesParameters",
    "TrendingParameters",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "TenorError",
    "TenorHTTPError",
    "TenorNetworkError",
    "TenorSerializationError",
]
