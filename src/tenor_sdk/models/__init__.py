"""SDK request and response models."""

from tenor_sdk.models.base import TenorModel
from tenor_sdk.models.errors import ErrorResponse

from tenor_sdk.models.categories import CategoriesResponse, CategoryTag
from tenor_sdk.models.enums import (
    ALL_MEDIA_FILTERS,
    ArRange,
    CategoryType,
    ContentFilter,
    MediaFilter,
    SearchFilter,
    encode_media_filters,
)
from tenor_sdk.models.locale import Locale
from tenor_sdk.models.params import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    CategoriesParameters,
    FeaturedParameters,
    SearchParameters,
    TrendingParameters,
)
from tenor_sdk.models.search import ContentFormats, MediaObject, ResponseObject, SearchResponse
from tenor_sdk.models.trending import TrendingResponse
