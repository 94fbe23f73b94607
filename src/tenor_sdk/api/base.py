"""Request/parse helper shared by the API groups."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import ValidationError

from tenor_sdk.errors import TenorError, TenorSerializationError
from tenor_sdk.models.base import TenorModel

if TYPE_CHECKING:
    from tenor_sdk.http import HTTPClient

log = logging.getLogger(__name__)

T = TypeVar("T", bound=TenorModel)


async def fetch(
    http: HTTPClient,
    path: str,
    model: type[T],
    *,
    params: dict[str, Any] | None = None,
    label: str,
) -> T:
    """GET ``path`` and validate the body text into ``model``.

    Logs one debug line on success and one error line on failure. Errors
    are re-raised unchanged.
    """
    try:
        r = await http.get(path, params=params)
        body = r.text
        try:
            result = model.model_validate_json(body)
        except ValidationError as exc:
            raise TenorSerializationError(
                f"{label}: response does not match {model.__name__}: {exc.error_count()} error(s)",
                body=body,
            ) from exc
    except TenorError as exc:
        log.error("%s failed: %s", label, exc)
        raise
    log.debug("%s successful.", label)
    return result
