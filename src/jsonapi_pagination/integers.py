"""Integer converters for JSON values that may be quoted."""

from __future__ import annotations

import json
import re
from typing import Any

from .document import Error, Source
from .fields import FieldError

_LEADING_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_integer_prefix(text: str) -> tuple[int, str] | None:
    """Parse the integer at the start of ``text``.

    Returns the integer and the unparsed remainder, or None when ``text`` does
    not start with an optionally signed run of ASCII digits, or the run is too
    long to convert.
    """
    match = _LEADING_INTEGER_RE.match(text)
    if match is None:
        return None
    try:
        integer = int(match.group())
    except ValueError:
        # digit run beyond sys.get_int_max_str_digits()
        return None
    return integer, text[match.end() :]


def quoted_integer_from_params(quoted: str, pointer: str) -> int:
    """Convert a string that must contain exactly one integer."""
    parsed = parse_integer_prefix(quoted)
    if parsed is None:
        raise FieldError(Error.type_error(pointer, "quoted integer"))
    integer, excess = parsed
    if excess:
        raise FieldError(
            Error(
                title="Excess text in quoted integer",
                detail=(
                    f"`{pointer}` contains quoted integer (`{integer}`), "
                    f"but also excess text (`{json.dumps(excess)}`)"
                ),
                source=Source(pointer=pointer),
                meta={"excess": excess, "integer": integer, "type": "quoted integer"},
            )
        )
    return integer


def integer_from_params(value: Any, pointer: str) -> int:
    """Convert a native or quoted integer."""
    # bool is an int subclass but never a JSON number
    if isinstance(value, bool):
        raise FieldError(Error.type_error(pointer, "integer"))
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return quoted_integer_from_params(value, pointer)
    raise FieldError(Error.type_error(pointer, "integer"))


def positive_integer_from_params(value: Any, pointer: str) -> int:
    """Convert a native or quoted integer that must be greater than zero."""
    integer = integer_from_params(value, pointer)
    if integer <= 0:
        raise FieldError(Error.type_error(pointer, "positive integer"))
    return integer
