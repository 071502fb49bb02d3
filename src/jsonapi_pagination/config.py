"""Library settings loaded from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, TextIO

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import PaginationError, PaginationErrorCodes
from .logger import new_logger


class LogSection(BaseModel):
    """Log settings."""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class PaginationConfig(BaseModel):
    """Settings read from the ``pagination`` key of a YAML file."""

    log: LogSection = Field(default_factory=LogSection)


def load_config(path: Path) -> PaginationConfig:
    """Read the ``pagination`` section of a YAML file.

    The section may sit at the top level of an application's settings file;
    a file without it yields the defaults.

    Raises:
        PaginationError: READ_FILE_ERROR, PARSE_YAML_ERROR or VALIDATION_ERROR
    """
    code = PaginationErrorCodes.READ_FILE
    try:
        text = path.read_text(encoding="utf-8")
        code = PaginationErrorCodes.PARSE_YAML
        document = yaml.safe_load(text) or {}
        code = PaginationErrorCodes.VALIDATION
        if not isinstance(document, dict):
            raise ValueError(f"top level must be a mapping, got {type(document).__name__}")
        return PaginationConfig.model_validate(document.get("pagination") or {})
    except (OSError, yaml.YAMLError, ValueError, ValidationError) as e:
        raise PaginationError(code=code, message=f"{path}: {e}", cause=e) from e


def configure(
    config: PaginationConfig, stream: TextIO | None = None
) -> structlog.stdlib.BoundLogger:
    """Apply the log settings of ``config``."""
    return new_logger(level=config.log.level, format=config.log.format, stream=stream)
