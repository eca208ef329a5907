"""Tests for loading styling options."""

import json
from pathlib import Path

import pytest

from inlinestyle.config import (
    CONFIG_ENV_VAR,
    ConfigError,
    load_options,
    options_from_mapping,
)
from inlinestyle.styling import StylingOptions


def test_defaults_without_file() -> None:
    assert load_options() == StylingOptions()


def test_yaml_file_with_section(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "styling:\n  open_delimiter: '[['\n  close_delimiter: ']]'\n",
        encoding="utf-8",
    )

    options = load_options(path)

    assert options.open_delimiter == "[["
    assert options.close_delimiter == "]]"
    assert options.explicit_style_wins is False


def test_json_file_without_section(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"explicit_style_wins": True}))

    assert load_options(path).explicit_style_wins is True


def test_empty_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_options(path) == StylingOptions()


def test_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("open_delimiter: '<'\nclose_delimiter: '>'\n")

    options = load_options(
        path, {"open_delimiter": "((", "close_delimiter": None}
    )

    assert options.open_delimiter == "(("
    assert options.close_delimiter == ">"


def test_environment_names_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("explicit_style_wins: true\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_options().explicit_style_wins is True


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ConfigError, match="delimiter"):
        options_from_mapping({"delimiter": "{"})


@pytest.mark.parametrize(
    "data",
    [
        {"open_delimiter": ""},
        {"close_delimiter": 5},
        {"explicit_style_wins": "yes"},
    ],
)
def test_invalid_values_are_rejected(data: dict) -> None:
    with pytest.raises(ConfigError):
        options_from_mapping(data)


def test_non_mapping_file_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ConfigError):
        load_options(path)


def test_non_mapping_section_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("styling: braces\n")

    with pytest.raises(ConfigError):
        load_options(path)


def test_malformed_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("styling: [unclosed\n")

    with pytest.raises(ConfigError, match="invalid configuration"):
        load_options(path)


def test_malformed_json_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError, match="invalid configuration"):
        load_options(path)


def test_missing_environment_config_is_reported(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))

    with pytest.raises(ConfigError, match="cannot read configuration"):
        load_options()
