"""Search and featured response models.

Field names mirror Tenor's response objects:
https://developers.google.com/tenor/guides/response-objects-and-errors
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from tenor_sdk.models.base import TenorModel
from tenor_sdk.models.enums import MediaFilter


class MediaObject(TenorModel):
    url: str
    duration: float = 0.0
    preview: str = ""
    dimensions: list[int] = Field(default_factory=list, alias="dims")
    size: int = 0

    @property
    def width(self) -> int | None:
        return self.dimensions[0] if self.dimensions else None

    @property
    def height(self) -> int | None:
        return self.dimensions[1] if len(self.dimensions) > 1 else None


class ContentFormats(TenorModel):
    """Every format Tenor may return for one result.

    MP4 and WebM play once (``loopedmp4`` a few times), GIF loops forever.
    Transparent formats only appear for sticker content.
    """

    gifpreview: MediaObject | None = None
    tinygifpreview: MediaObject | None = None
    nanogifpreview: MediaObject | None = None
    preview: MediaObject | None = None
    gif: MediaObject | None = None
    mediumgif: MediaObject | None = None
    tinygif: MediaObject | None = None
    nanogif: MediaObject | None = None
    mp4: MediaObject | None = None
    loopedmp4: MediaObject | None = None
    tinymp4: MediaObject | None = None
    nanomp4: MediaObject | None = None
    webm: MediaObject | None = None
    tinywebm: MediaObject | None = None
    nanowebm: MediaObject | None = None
    webp: MediaObject | None = None
    webp_transparent: MediaObject | None = None
    tinywebp_transparent: MediaObject | None = None
    nanowebp_transparent: MediaObject | None = None
    gif_transparent: MediaObject | None = None
    tinygif_transparent: MediaObject | None = None
    nanogif_transparent: MediaObject | None = None

    def get(self, media: MediaFilter | str) -> MediaObject | None:
        return getattr(self, MediaFilter(media).value)

    def available(self) -> dict[str, MediaObject]:
        """Formats present in this result, keyed by format name."""
        return {name: obj for name, obj in self if obj is not None}


class ResponseObject(TenorModel):
    # ``hascaption`` and ``bg_color`` are documented but never sent.
    created: float
    hasaudio: bool
    id: str
    media_formats: ContentFormats
    tags: list[str] = []
    title: str = ""
    content_description: str = ""
    itemurl: str = ""
    url: str = ""
    flags: list[Any] = []


class SearchResponse(TenorModel):
    results: list[ResponseObject]
    next: str = ""
