"""Conversion between pages and URL query strings."""

from __future__ import annotations

import logging
import re
from typing import Union
from urllib.parse import ParseResult, SplitResult, parse_qsl, urlencode, urlsplit

from .exceptions import PaginationError, PaginationErrorCodes
from .page import Page

logger = logging.getLogger(__name__)

NUMBER_KEY = "page[number]"
SIZE_KEY = "page[size]"

_QUERY_KEYS = {NUMBER_KEY: "number", SIZE_KEY: "size"}
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

Uri = Union[str, SplitResult, ParseResult]


def _to_integer(key: str, value: str) -> int:
    try:
        if _INTEGER_RE.fullmatch(value) is None:
            raise ValueError(f"invalid literal for int(): {value!r}")
        return int(value)
    except ValueError as e:
        raise PaginationError(
            code=PaginationErrorCodes.INVALID_QUERY_INTEGER,
            message=f"{key} is not an integer: {value[:32]!r}",
            cause=e,
        ) from e


def from_query(query: str | None) -> Page | None:
    """Extract the page from ``page[number]`` and ``page[size]`` query pairs.

    Returns None unless both keys are present. When a key repeats, the last
    value wins.

    Raises:
        PaginationError: a page value is not a positive integer.
    """
    if not query:
        return None
    fields: dict[str, int] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        name = _QUERY_KEYS.get(key)
        if name is not None:
            fields[name] = _to_integer(key, value)
    if len(fields) < len(_QUERY_KEYS):
        return None
    try:
        page = Page(**fields)
    except ValueError as e:
        raise PaginationError(
            code=PaginationErrorCodes.INVALID_QUERY_INTEGER,
            message=str(e),
            cause=e,
        ) from e
    logger.debug("page decoded from query", extra={"number": page.number, "size": page.size})
    return page


def from_uri(uri: Uri | None) -> Page | None:
    """Extract the page from the query of ``uri``."""
    if uri is None:
        return None
    if isinstance(uri, str):
        uri = urlsplit(uri)
    return from_query(uri.query)


def to_query(page: Page) -> str:
    """Convert ``page`` to a form-encoded query string."""
    return urlencode([(NUMBER_KEY, page.number), (SIZE_KEY, page.size)])
