from __future__ import annotations

from tenor_sdk.models.base import TenorModel


class CategoryTag(TenorModel):
    searchterm: str
    """The term, e.g. ``excited``."""
    path: str
    """API path that searches this category."""
    image: str
    """URL of the category's preview GIF."""
    name: str
    """Display name, e.g. ``#excited``."""


class CategoriesResponse(TenorModel):
    locale: str
    tags: list[CategoryTag]
