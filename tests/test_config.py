"""config and logger unit tests."""

import io
import json
from pathlib import Path

import pytest
from jsonapi_pagination import (
    LogSection,
    Page,
    PaginationConfig,
    PaginationError,
    PaginationErrorCodes,
    configure,
    from_params,
    load_config,
    new_logger,
    to_pagination,
)


def test_default_config() -> None:
    config = PaginationConfig()
    assert config.log.level == "INFO"
    assert config.log.format == "json"


def test_load_config(tmp_path: Path) -> None:
    config_file = tmp_path / "settings.yaml"
    config_file.write_text(
        "app:\n  name: catalog\npagination:\n  log:\n    level: DEBUG\n    format: text\n"
    )
    config = load_config(config_file)
    assert config.log.level == "DEBUG"
    assert config.log.format == "text"


def test_load_config_without_section(tmp_path: Path) -> None:
    config_file = tmp_path / "settings.yaml"
    config_file.write_text("app:\n  name: catalog\n")
    assert load_config(config_file) == PaginationConfig()


def test_load_empty_config(tmp_path: Path) -> None:
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")
    assert load_config(config_file) == PaginationConfig()


def test_load_config_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(PaginationError) as exc_info:
        load_config(tmp_path / "missing.yaml")
    assert exc_info.value.code == PaginationErrorCodes.READ_FILE
    assert isinstance(exc_info.value.__cause__, OSError)


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("pagination: {invalid: yaml: content:\n")
    with pytest.raises(PaginationError) as exc_info:
        load_config(bad_file)
    assert exc_info.value.code == PaginationErrorCodes.PARSE_YAML


def test_load_config_validation_error(tmp_path: Path) -> None:
    bad_file = tmp_path / "bad_format.yaml"
    bad_file.write_text("pagination:\n  log:\n    format: xml\n")
    with pytest.raises(PaginationError) as exc_info:
        load_config(bad_file)
    assert exc_info.value.code == PaginationErrorCodes.VALIDATION
    assert str(exc_info.value).startswith("VALIDATION_ERROR: ")


def test_load_config_top_level_not_mapping(tmp_path: Path) -> None:
    bad_file = tmp_path / "list.yaml"
    bad_file.write_text("- pagination\n")
    with pytest.raises(PaginationError) as exc_info:
        load_config(bad_file)
    assert exc_info.value.code == PaginationErrorCodes.VALIDATION


# --- logger ---


def test_rejected_params_render_extra_fields_as_json() -> None:
    stream = io.StringIO()
    configure(PaginationConfig(log=LogSection(level="DEBUG")), stream=stream)
    from_params({"page": {"number": 0, "size": 0}})

    event = json.loads(stream.getvalue().splitlines()[-1])
    assert event["event"] == "page params rejected"
    assert event["errors"] == 2
    assert event["level"] == "debug"
    assert event["logger"] == "jsonapi_pagination.params"


def test_out_of_range_renders_as_text() -> None:
    stream = io.StringIO()
    new_logger(level="DEBUG", format="text", stream=stream)
    to_pagination(Page(number=5, size=10), 10)
    output = stream.getvalue()
    assert "page number out of range" in output
    assert "count" in output


def test_level_filters_library_records() -> None:
    stream = io.StringIO()
    new_logger(level="INFO", stream=stream)
    from_params({"page": 1})
    assert stream.getvalue() == ""


def test_reconfiguring_replaces_handler() -> None:
    first = io.StringIO()
    second = io.StringIO()
    new_logger(level="DEBUG", stream=first)
    new_logger(level="DEBUG", stream=second)
    from_params({"page": 1})
    assert first.getvalue() == ""
    assert "page params rejected" in second.getvalue()


def test_new_logger_returns_bound_logger() -> None:
    logger = new_logger(stream=io.StringIO())
    assert logger.bind(key="value") is not None
