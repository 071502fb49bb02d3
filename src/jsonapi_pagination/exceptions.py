"""Pagination exceptions."""

from __future__ import annotations


class PaginationError(Exception):
    """Fatal pagination error with code and optional cause.

    Reportable validation failures are returned as ``Document`` values instead.
    """

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class PaginationErrorCodes:
    """PaginationError code constants."""

    INVALID_PARAMS: str = "INVALID_PARAMS"
    INVALID_QUERY_INTEGER: str = "INVALID_QUERY_INTEGER"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"
