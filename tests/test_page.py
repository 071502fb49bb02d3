"""Page value unit tests."""

import dataclasses

import pytest
from jsonapi_pagination import Page, PageDirective


def test_page_defaults() -> None:
    page = Page()
    assert page.number == 1
    assert page.size == 10


def test_page_is_immutable() -> None:
    page = Page(number=2, size=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        page.number = 3  # type: ignore[misc]


@pytest.mark.parametrize("number,size", [(0, 10), (1, 0), (-1, 10), (True, 10), ("1", 10)])
def test_page_rejects_invalid_fields(number: object, size: object) -> None:
    with pytest.raises(ValueError, match="positive integer"):
        Page(number=number, size=size)  # type: ignore[arg-type]


def test_page_directives_are_distinct() -> None:
    assert PageDirective.ABSENT is not PageDirective.ALL
    assert {directive.value for directive in PageDirective} == {"absent", "all"}
