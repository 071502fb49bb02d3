"""JSON:API error document models."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

UNPROCESSABLE_ENTITY = "422"


class Source(BaseModel):
    """Location of the offending value in the request."""

    model_config = ConfigDict(frozen=True)

    pointer: str


class Error(BaseModel):
    """A single error record."""

    model_config = ConfigDict(frozen=True)

    status: str = UNPROCESSABLE_ENTITY
    title: str
    detail: str
    source: Source
    meta: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("meta")
    @classmethod
    def _freeze_meta(cls, meta: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(meta))

    @field_serializer("meta")
    def _dump_meta(self, meta: Mapping[str, Any]) -> dict[str, Any]:
        return dict(meta)

    @classmethod
    def type_error(cls, pointer: str, type_name: str) -> Error:
        """Error for a value at ``pointer`` that is not of ``type_name``."""
        return cls(
            title="Type is wrong",
            detail=f"`{pointer}` type is not {type_name}",
            source=Source(pointer=pointer),
            meta={"type": type_name},
        )

    @classmethod
    def missing_child(cls, pointer: str, child: str) -> Error:
        """Error for a required ``child`` absent from the object at ``pointer``."""
        return cls(
            title="Child missing",
            detail=f"`{pointer}/{child}` is missing",
            source=Source(pointer=pointer),
            meta={"child": child},
        )


class Document(BaseModel):
    """Ordered collection of errors, the body of a 422 response."""

    model_config = ConfigDict(frozen=True)

    errors: tuple[Error, ...] = ()

    def to_json(self) -> dict[str, Any]:
        """Return the JSON-compatible wire shape."""
        return self.model_dump(mode="json")
