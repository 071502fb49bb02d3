"""JSON:API page-based pagination library."""

from .config import LogSection, PaginationConfig, configure, load_config
from .document import Document, Error, Source
from .exceptions import PaginationError, PaginationErrorCodes
from .fields import FieldError, FieldErrors, FieldSpec, reduce_fields
from .integers import (
    integer_from_params,
    parse_integer_prefix,
    positive_integer_from_params,
)
from .logger import new_logger
from .page import Page, PageDirective
from .pagination import (
    Pagination,
    first_page,
    last_page,
    next_page,
    page_count,
    previous_page,
    to_links,
    to_pagination,
)
from .params import ParamsResult, from_params, to_params
from .query import from_query, from_uri, to_query

__all__ = [
    "Document",
    "Error",
    "FieldError",
    "FieldErrors",
    "FieldSpec",
    "LogSection",
    "Page",
    "PageDirective",
    "Pagination",
    "PaginationConfig",
    "PaginationError",
    "PaginationErrorCodes",
    "ParamsResult",
    "Source",
    "configure",
    "first_page",
    "from_params",
    "from_query",
    "from_uri",
    "integer_from_params",
    "last_page",
    "load_config",
    "new_logger",
    "next_page",
    "page_count",
    "parse_integer_prefix",
    "positive_integer_from_params",
    "previous_page",
    "reduce_fields",
    "to_links",
    "to_pagination",
    "to_params",
    "to_query",
]
