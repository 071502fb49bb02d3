"""Page-based pagination value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PageDirective(Enum):
    """Successful outcomes of reading params that carry no page."""

    ABSENT = "absent"
    """No ``"page"`` key: the caller did not ask for pagination."""

    ALL = "all"
    """``"page": null``: pagination explicitly disabled, return everything."""


@dataclass(frozen=True)
class Page:
    """A 1-based page of fixed size."""

    number: int = 1
    size: int = 10

    def __post_init__(self) -> None:
        for name in ("number", "size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"page {name} must be a positive integer, got {value!r}")
