"""Per-endpoint request parameters and their query-string encoding."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, TypeVar

from pydantic import AfterValidator, Field

from tenor_sdk.models.base import TenorModel
from tenor_sdk.models.enums import (
    ALL_MEDIA_FILTERS,
    ArRange,
    CategoryType,
    ContentFilter,
    MediaFilter,
    SearchFilter,
    encode_media_filters,
)

if TYPE_CHECKING:
    from tenor_sdk.models.search import SearchResponse

P = TypeVar("P", bound="_PagedParameters")

#: Number of results to fetch when unsure.
DEFAULT_LIMIT = 20

#: Documented maximum. Not enforced here; Tenor decides what larger values do.
MAX_LIMIT = 50

# An empty format list means "no filter", the same as None.
MediaFilters = Annotated[tuple[MediaFilter, ...] | None, AfterValidator(lambda v: v or None)]


def _bool(value: bool) -> str:
    return "true" if value else "false"


class _Parameters(TenorModel):
    client_key: str | None = None

    @abstractmethod
    def to_query(self) -> dict[str, str]:
        """The query parameters this request contributes, in send order."""

    def _base_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.client_key is not None:
            query["client_key"] = self.client_key
        return query


class _PagedParameters(_Parameters):
    pos: str | None = None

    def next_page(self: P, cursor: str | SearchResponse) -> P:
        """Copy of these parameters continuing from ``cursor``.

        Accepts the ``next`` string or the response that carried it.
        """
        if not isinstance(cursor, str):
            cursor = cursor.next
        return self.model_copy(update={"pos": cursor or None})


class SearchParameters(_PagedParameters):
    search_filter: SearchFilter | None = None
    content_filter: ContentFilter = ContentFilter.off
    media_filter: MediaFilters = ALL_MEDIA_FILTERS
    ar_range: ArRange = ArRange.all
    random: bool = False
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)

    def to_query(self) -> dict[str, str]:
        query = self._base_query()
        if self.search_filter is not None:
            query.update([self.search_filter.to_query_parameter()])
        query.update([self.content_filter.to_query_parameter()])
        if self.media_filter is not None:
            query["media_filter"] = encode_media_filters(self.media_filter)
        query.update([self.ar_range.to_query_parameter()])
        query["random"] = _bool(self.random)
        query["limit"] = str(self.limit)
        if self.pos is not None:
            query["pos"] = self.pos
        return query


class FeaturedParameters(_PagedParameters):
    search_filter: SearchFilter | None = None
    media_filter: MediaFilters = ALL_MEDIA_FILTERS
    ar_range: ArRange = ArRange.all
    content_filter: ContentFilter = ContentFilter.off
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)

    def to_query(self) -> dict[str, str]:
        query = self._base_query()
        if self.search_filter is not None:
            query.update([self.search_filter.to_query_parameter()])
        if self.media_filter is not None:
            query["media_filter"] = encode_media_filters(self.media_filter)
        query.update([self.ar_range.to_query_parameter()])
        query.update([self.content_filter.to_query_parameter()])
        query["limit"] = str(self.limit)
        if self.pos is not None:
            query["pos"] = self.pos
        return query


class CategoriesParameters(_Parameters):
    type: CategoryType = CategoryType.featured
    content_filter: ContentFilter = ContentFilter.off

    def to_query(self) -> dict[str, str]:
        query = self._base_query()
        query.update([self.type.to_query_parameter()])
        query.update([self.content_filter.to_query_parameter()])
        return query


class TrendingParameters(_Parameters):
    limit: int = Field(default=DEFAULT_LIMIT, ge=0)

    def to_query(self) -> dict[str, str]:
        query = self._base_query()
        query["limit"] = str(self.limit)
        return query
