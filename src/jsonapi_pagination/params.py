"""Conversion between pages and request params."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Union

from .document import Document, Error
from .exceptions import PaginationError, PaginationErrorCodes
from .fields import FieldSpec, reduce_fields
from .integers import positive_integer_from_params
from .page import Page, PageDirective

logger = logging.getLogger(__name__)

PAGE_POINTER = "/page"

PAGE_FIELDS = (
    FieldSpec(name="number", convert=positive_integer_from_params, required=True),
    FieldSpec(name="size", convert=positive_integer_from_params, required=True),
)

ParamsResult = Union[Page, PageDirective, Document]


def from_params(params: Mapping[str, Any]) -> ParamsResult:
    """Extract the page from decoded request params.

    Returns ``PageDirective.ABSENT`` when there is no ``"page"`` key,
    ``PageDirective.ALL`` when ``"page"`` is null, the ``Page`` when
    ``"page"`` is a valid object, and otherwise a ``Document`` with one error
    per violation.

    Raises:
        PaginationError: ``params`` is not a mapping.
    """
    if not isinstance(params, Mapping):
        raise PaginationError(
            code=PaginationErrorCodes.INVALID_PARAMS,
            message=f"params must be a mapping, got {type(params).__name__}",
        )
    if "page" not in params:
        return PageDirective.ABSENT
    page = params["page"]
    if page is None:
        return PageDirective.ALL
    if not isinstance(page, Mapping):
        document = Document(errors=(Error.type_error(PAGE_POINTER, "object"),))
        logger.debug("page params rejected", extra={"errors": len(document.errors)})
        return document

    reduced = reduce_fields(PAGE_FIELDS, page, PAGE_POINTER)
    if isinstance(reduced, Document):
        logger.debug("page params rejected", extra={"errors": len(reduced.errors)})
        return reduced
    return Page(number=reduced["number"], size=reduced["size"])


def to_params(page: Page | PageDirective | None) -> dict[str, Any]:
    """Convert a page back into request params.

    ``None`` is accepted as a synonym for ``PageDirective.ABSENT``.
    """
    if isinstance(page, Page):
        return {"page": {"number": page.number, "size": page.size}}
    if page is PageDirective.ALL:
        return {"page": None}
    if page is PageDirective.ABSENT or page is None:
        return {}
    raise TypeError(f"cannot convert {page!r} to params")
