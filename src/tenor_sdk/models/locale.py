"""Language/region pair sent with every request."""

from __future__ import annotations

import re
from typing import Any

from babel import Locale as _BabelLocale
from pydantic import field_validator

from tenor_sdk.models.base import TenorModel

# CLDR display names double as the ISO 639-1 / ISO 3166-1 code tables.
_CLDR = _BabelLocale("en")
_LANGUAGE_CODES = frozenset(code for code in _CLDR.languages if len(code) == 2)
# CLDR also names a few groupings and private-use codes that aren't countries.
_NOT_COUNTRIES = frozenset({"EU", "EZ", "QO", "UN", "XA", "XB", "ZZ"})
_COUNTRY_CODES = frozenset(
    code for code in _CLDR.territories if len(code) == 2 and code.isalpha() and code not in _NOT_COUNTRIES
)

_SEPARATOR = re.compile(r"[_-]")


def check_country(code: str) -> str:
    """Upper-case ``code`` and check it is an ISO 3166-1 alpha-2 country."""
    code = code.upper()
    if code not in _COUNTRY_CODES:
        raise ValueError(f"unknown ISO 3166-1 country code: {code!r}")
    return code


class Locale(TenorModel):
    """An ISO 639-1 language plus ISO 3166-1 alpha-2 country, e.g. ``en_US``.

    The country differentiates dialects of the language. ``Locale()`` is
    ``en_US``; ``Locale("ja", "JP")`` is ``ja_JP``.
    """

    language: str = "en"
    country: str = "US"

    def __init__(self, language: str = "en", country: str = "US", **data: Any) -> None:
        super().__init__(language=language, country=country, **data)

    @field_validator("language")
    @classmethod
    def _check_language(cls, v: str) -> str:
        v = v.lower()
        if v not in _LANGUAGE_CODES:
            raise ValueError(f"unknown ISO 639-1 language code: {v!r}")
        return v

    @field_validator("country")
    @classmethod
    def _check_country(cls, v: str) -> str:
        return check_country(v)

    @classmethod
    def parse(cls, value: str) -> Locale:
        """Parse ``ja_JP`` or ``ja-JP``."""
        parts = _SEPARATOR.split(value.strip())
        if len(parts) != 2:
            raise ValueError(f"expected <language>_<COUNTRY>, got {value!r}")
        return cls(parts[0], parts[1])

    def encode(self) -> str:
        return f"{self.language.lower()}_{self.country.upper()}"

    def to_query_parameter(self) -> tuple[str, str]:
        return "locale", self.encode()

    def __str__(self) -> str:
        return self.encode()
