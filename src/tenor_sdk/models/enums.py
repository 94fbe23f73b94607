"""Enumerated request filters and their query-string tokens.

Every member's value is the literal token Tenor expects, so encoding a member
is a table lookup and can't fail.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class _QueryEnum(str, Enum):
    def __str__(self) -> str:
        return self.value

    @property
    def token(self) -> str:
        return self.value

    def to_query_parameter(self) -> tuple[str, str]:
        """The ``(key, token)`` pair this value contributes to a request."""
        return _QUERY_KEYS[type(self)], self.value


class ContentFilter(_QueryEnum):
    """Content safety filter level. Tenor defaults to ``off``."""

    off = "off"
    low = "low"
    medium = "medium"
    high = "high"


class ArRange(_QueryEnum):
    """Aspect ratio range results must fit within.

    - ``all``: no constraints
    - ``wide``: 0.42 <= aspect ratio <= 2.36
    - ``standard``: 0.56 <= aspect ratio <= 1.78
    """

    all = "all"
    wide = "wide"
    standard = "standard"


class SearchFilter(_QueryEnum):
    """Non-GIF content types. Leave unset for GIF results.

    ``sticker`` returns static and animated stickers, ``static`` only static
    stickers and ``non_static`` only animated ones.
    """

    sticker = "sticker"
    static = "sticker,static"
    non_static = "sticker,-static"


class CategoryType(_QueryEnum):
    featured = "featured"
    trending = "trending"


class MediaFilter(_QueryEnum):
    """GIF formats to include in each result's ``media_formats``."""

    preview = "preview"
    gif = "gif"
    mediumgif = "mediumgif"
    tinygif = "tinygif"
    nanogif = "nanogif"
    mp4 = "mp4"
    loopedmp4 = "loopedmp4"
    tinymp4 = "tinymp4"
    nanomp4 = "nanomp4"
    webm = "webm"
    tinywebm = "tinywebm"
    nanowebm = "nanowebm"
    webp_transparent = "webp_transparent"
    tinywebp_transparent = "tinywebp_transparent"
    nanowebp_transparent = "nanowebp_transparent"
    gif_transparent = "gif_transparent"
    tinygif_transparent = "tinygif_transparent"
    nanogif_transparent = "nanogif_transparent"

    @classmethod
    def all(cls) -> tuple[MediaFilter, ...]:
        return ALL_MEDIA_FILTERS


ALL_MEDIA_FILTERS: tuple[MediaFilter, ...] = tuple(MediaFilter)

_QUERY_KEYS: dict[type[_QueryEnum], str] = {
    ContentFilter: "contentfilter",
    ArRange: "ar_range",
    SearchFilter: "searchfilter",
    CategoryType: "type",
    MediaFilter: "media_filter",
}


def encode_media_filters(filters: Iterable[MediaFilter]) -> str:
    """Join format tokens with commas, e.g. ``gif,mp4``.

    No trailing comma is emitted after the last token.
    """
    return ",".join(MediaFilter(f).value for f in filters)
