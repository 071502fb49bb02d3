"""Declarative field extraction for JSON objects."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .document import Document, Error

Converter = Callable[[Any, str], Any]


class FieldError(Exception):
    """Raised by a converter when a field value is invalid."""

    def __init__(self, *errors: Error) -> None:
        self.errors = errors
        super().__init__("; ".join(error.detail for error in errors))


class FieldErrors:
    """A collection of error records gathered across fields."""

    def __init__(self) -> None:
        self._errors: list[Error] = []

    def has_errors(self) -> bool:
        """Returns True if there are any errors."""
        return len(self._errors) > 0

    def get_errors(self) -> list[Error]:
        """Returns a copy of all collected errors."""
        return list(self._errors)

    def add(self, error: Error) -> None:
        """Adds an error record to the collection."""
        self._errors.append(error)

    def to_document(self) -> Document:
        return Document(errors=tuple(self._errors))


@dataclass(frozen=True)
class FieldSpec:
    """Describes one member of a JSON object.

    ``convert`` receives the raw value and its JSON pointer and returns the
    converted value, or raises ``FieldError``.
    """

    name: str
    convert: Converter
    required: bool = False


def reduce_fields(
    specs: Iterable[FieldSpec], parent: Mapping[str, Any], pointer: str
) -> dict[str, Any] | Document:
    """Convert every field of ``parent`` described by ``specs``.

    Returns the converted values keyed by name, or a ``Document`` holding one
    error per failing field in ``specs`` order.
    """
    collected = FieldErrors()
    values: dict[str, Any] = {}
    for spec in specs:
        if spec.name not in parent:
            if spec.required:
                collected.add(Error.missing_child(pointer, spec.name))
            continue
        try:
            values[spec.name] = spec.convert(parent[spec.name], f"{pointer}/{spec.name}")
        except FieldError as e:
            for error in e.errors:
                collected.add(error)
    if collected.has_errors():
        return collected.to_document()
    return values
