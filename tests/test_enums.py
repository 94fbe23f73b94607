"""Tests for filter enums and their query tokens."""

import pytest

from tenor_sdk.models.enums import (
    ALL_MEDIA_FILTERS,
    ArRange,
    CategoryType,
    ContentFilter,
    MediaFilter,
    SearchFilter,
    encode_media_filters,
)


class TestTokens:
    def test_content_filter(self):
        assert [f.token for f in ContentFilter] == ["off", "low", "medium", "high"]
        assert ContentFilter.medium.to_query_parameter() == ("contentfilter", "medium")

    def test_ar_range(self):
        assert [r.token for r in ArRange] == ["all", "wide", "standard"]
        assert ArRange.standard.to_query_parameter() == ("ar_range", "standard")

    def test_search_filter_compound_values(self):
        assert SearchFilter.sticker.to_query_parameter() == ("searchfilter", "sticker")
        assert SearchFilter.static.to_query_parameter() == ("searchfilter", "sticker,static")
        assert SearchFilter.non_static.to_query_parameter() == ("searchfilter", "sticker,-static")

    def test_category_type(self):
        assert CategoryType.trending.to_query_parameter() == ("type", "trending")

    @pytest.mark.parametrize("enum_cls", [ContentFilter, ArRange, SearchFilter, CategoryType, MediaFilter])
    def test_every_member_encodes(self, enum_cls):
        """Encoding is total: every member yields a non-empty token, twice the same."""
        for member in enum_cls:
            key, token = member.to_query_parameter()
            assert key
            assert token == member.token == str(member)
            assert member.to_query_parameter() == (key, token)

    def test_tokens_round_trip_to_member(self):
        for member in MediaFilter:
            assert MediaFilter(member.token) is member


class TestMediaFilter:
    def test_all_lists_every_format_in_order(self):
        assert ALL_MEDIA_FILTERS == tuple(MediaFilter)
        assert MediaFilter.all() is ALL_MEDIA_FILTERS
        assert len(ALL_MEDIA_FILTERS) == 18
        assert ALL_MEDIA_FILTERS[0] is MediaFilter.preview
        assert ALL_MEDIA_FILTERS[-1] is MediaFilter.nanogif_transparent

    def test_transparent_tokens(self):
        assert MediaFilter.tinywebp_transparent.token == "tinywebp_transparent"
        assert MediaFilter.gif_transparent.token == "gif_transparent"

    def test_encode_list_has_no_trailing_comma(self):
        assert encode_media_filters([MediaFilter.gif, MediaFilter.mp4]) == "gif,mp4"

    def test_encode_single_and_empty(self):
        assert encode_media_filters([MediaFilter.tinygif]) == "tinygif"
        assert encode_media_filters([]) == ""

    def test_encode_accepts_tokens(self):
        assert encode_media_filters(["nanomp4", MediaFilter.webm]) == "nanomp4,webm"

    def test_encode_rejects_unknown_token(self):
        with pytest.raises(ValueError):
            encode_media_filters(["gifv"])
