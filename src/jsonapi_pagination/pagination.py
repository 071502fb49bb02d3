"""Page arithmetic and the pagination aggregate."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from .document import Document, Error, Source
from .page import Page
from .query import NUMBER_KEY, SIZE_KEY, to_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pagination:
    """Pages around a requested page, used to build navigation links."""

    first: Page
    last: Page
    total_size: int
    next: Page | None = None
    previous: Page | None = None


def page_count(size: int, total_size: int) -> int:
    """Number of pages of ``size`` needed for ``total_size`` resources.

    There is always at least one page, even when there are no resources.
    """
    if total_size == 0:
        return 1
    return math.ceil(total_size / size)


def first_page(page: Page) -> Page:
    return Page(number=1, size=page.size)


def last_page(page: Page, count: int) -> Page:
    return Page(number=count, size=page.size)


def next_page(page: Page, count: int) -> Page | None:
    """The page after ``page``, or None when ``page`` is at or past ``count``."""
    if page.number < count:
        return Page(number=page.number + 1, size=page.size)
    return None


def previous_page(page: Page) -> Page | None:
    """The page before ``page``, or None on the first page."""
    if page.number > 1:
        return Page(number=page.number - 1, size=page.size)
    return None


def to_pagination(page: Page, total_size: int) -> Pagination | Document:
    """Compute the pages around ``page`` when there are ``total_size`` resources.

    Returns a ``Document`` with a single error when ``page.number`` is beyond
    the page count.
    """
    if total_size < 0:
        raise ValueError(f"total_size must be >= 0, got {total_size}")
    count = page_count(page.size, total_size)
    if page.number > count:
        logger.debug("page number out of range", extra={"number": page.number, "count": count})
        return Document(
            errors=(
                Error(
                    title="Page number must be between 1 and the page count",
                    detail=(
                        f"Page number ({page.number}) must be between 1 "
                        f"and the page count ({count})"
                    ),
                    source=Source(pointer="/page/number"),
                    meta={"count": count, "number": page.number},
                ),
            )
        )
    return Pagination(
        first=first_page(page),
        last=last_page(page, count),
        next=next_page(page, count),
        previous=previous_page(page),
        total_size=total_size,
    )


def _page_url(base_url: str, page: Page) -> str:
    parts = urlsplit(base_url)
    kept = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in (NUMBER_KEY, SIZE_KEY)
    ]
    query = "&".join(filter(None, (urlencode(kept), to_query(page))))
    return urlunsplit(parts._replace(query=query))


def to_links(pagination: Pagination, base_url: str) -> dict[str, str | None]:
    """JSON:API ``links`` for ``pagination`` relative to ``base_url``.

    Query pairs of ``base_url`` other than the page keys are kept.
    """
    return {
        "first": _page_url(base_url, pagination.first),
        "last": _page_url(base_url, pagination.last),
        "next": _page_url(base_url, pagination.next) if pagination.next else None,
        "prev": _page_url(base_url, pagination.previous) if pagination.previous else None,
    }
