"""Load styling options from configuration files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from attrs import fields

from inlinestyle.json_utils import json_loads
from inlinestyle.styling.options import StylingOptions

JSONDict = dict[str, Any]

# Environment variable naming the default configuration file.
CONFIG_ENV_VAR = "INLINESTYLE_CONFIG"

# Top-level key under which options may be nested.
SECTION_KEY = "styling"

_OPTION_NAMES = frozenset(f.name for f in fields(StylingOptions))


class ConfigError(ValueError):
    """Raised when a configuration file or override is invalid."""


def _load_config_file(path: Path) -> JSONDict:
    """Read a JSON or YAML configuration file from ``path``.

    Args:
        path: Location of the configuration file.

    Returns:
        The mapping of option names to values.

    Throws:
        ConfigError: If the file cannot be read or decoded, or does not
            hold a mapping.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: cannot read configuration: {exc}") from exc

    # Decode JSON or YAML depending on file extension.
    try:
        if path.suffix == ".json":
            data = json_loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise ConfigError(f"{path}: invalid configuration: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping of options")

    # Options may live under a dedicated section.
    section = data.get(SECTION_KEY, data)
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: '{SECTION_KEY}' must be a mapping")
    return section


def default_config_path() -> Path | None:
    """Return the configuration path named by the environment, if any."""

    value = os.environ.get(CONFIG_ENV_VAR)
    return Path(value) if value else None


def options_from_mapping(data: JSONDict) -> StylingOptions:
    """Build styling options from a plain mapping.

    Args:
        data: Option names mapped to values.

    Returns:
        The validated options.

    Throws:
        ConfigError: On unknown names or invalid values.
    """

    unknown = sorted(set(data) - _OPTION_NAMES)
    if unknown:
        raise ConfigError(f"Unknown styling options: {', '.join(unknown)}")

    try:
        return StylingOptions(**data)
    except (TypeError, ValueError) as exc:
        raise ConfigError(str(exc)) from exc


def load_options(
    path: Path | None = None, overrides: JSONDict | None = None
) -> StylingOptions:
    """Load styling options from a file and explicit overrides.

    Args:
        path: Configuration file; defaults to the file named by
            ``INLINESTYLE_CONFIG``. Without either, defaults are used.
        overrides: Values taking precedence over the file; ``None`` values
            are ignored.

    Returns:
        The resulting options.
    """

    path = path or default_config_path()
    data: JSONDict = _load_config_file(path) if path else {}

    # Explicit values win over the file contents.
    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    return options_from_mapping(data)
