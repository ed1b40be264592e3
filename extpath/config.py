"""Configuration handling for extpath."""

from __future__ import annotations

import dataclasses
import logging
import tomllib
from pathlib import Path
from typing import Any

from extpath.separators import (
    PRESET_NAMES,
    SeparatorConfig,
    get_preset,
    separators_from,
)

logger = logging.getLogger(__name__)


class ConfigFileError(Exception):
    """Raised when pyproject.toml contains invalid extpath configuration."""


_TOML_KEY_TO_FIELD: dict[str, str] = {
    "dialect": "dialect",
    "separators": "recognized_separators",
    "preferred-separator": "preferred_separator",
    "volume-separator": "volume_separator",
    "drive-letters": "supports_drive_letters",
    "unc-paths": "supports_unc_paths",
    "device-paths": "supports_device_paths",
    "case-sensitive": "case_sensitive",
    "collapse-separator-runs": "collapse_separator_runs",
    "preserve-separators-after-root": "preserve_separators_after_root",
    "trim-trailing-separators-except-root": "trim_trailing_separators_except_root",
}

_CHAR_FIELDS = frozenset({"preferred_separator", "volume_separator"})

_BOOL_FIELDS = frozenset(
    {
        "supports_drive_letters",
        "supports_unc_paths",
        "supports_device_paths",
        "case_sensitive",
        "collapse_separator_runs",
        "preserve_separators_after_root",
        "trim_trailing_separators_except_root",
    }
)


def _require_string(toml_key: str, value: object) -> str:
    """Raise ConfigFileError unless *value* is a str."""
    if not isinstance(value, str):
        raise ConfigFileError(
            f"[tool.extpath] '{toml_key}' must be a string, got {type(value).__name__}"
        )
    return value


def _convert_value(toml_key: str, field_name: str, value: object) -> object:
    """Validate and convert a single TOML value to its SeparatorConfig-compatible type."""
    if field_name == "dialect":
        name = _require_string(toml_key, value)
        if name.lower() not in PRESET_NAMES:
            raise ConfigFileError(
                f"[tool.extpath] '{toml_key}' must be one of "
                f"{', '.join(PRESET_NAMES)}, got '{name}'"
            )
        return name.lower()

    if field_name == "recognized_separators":
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigFileError(
                f"[tool.extpath] '{toml_key}' must be a list of strings"
            )
        return tuple(value)

    if field_name in _CHAR_FIELDS:
        return _require_string(toml_key, value)

    if field_name in _BOOL_FIELDS:
        if not isinstance(value, bool):
            raise ConfigFileError(
                f"[tool.extpath] '{toml_key}' must be a boolean, got {type(value).__name__}"
            )
        return value

    raise ConfigFileError(f"[tool.extpath] unhandled field '{toml_key}'")


def _parse_toml_section(section: dict[str, Any]) -> dict[str, object]:
    """Validate and convert a [tool.extpath] dict into config-compatible fields."""
    result: dict[str, object] = {}
    for toml_key, value in section.items():
        field_name = _TOML_KEY_TO_FIELD.get(toml_key)
        if field_name is None:
            raise ConfigFileError(
                f"[tool.extpath] unknown key '{toml_key}'"
            )
        result[field_name] = _convert_value(toml_key, field_name, value)
    return result


def load_file_config(path: Path | None = None) -> dict[str, object]:
    """Read [tool.extpath] from pyproject.toml, returning a config-compatible dict.

    Returns an empty dict if the file doesn't exist or has no [tool.extpath] section.
    """
    if path is None:
        path = Path("pyproject.toml")
    if not path.is_file():
        logger.debug("No config file at %s", path)
        return {}
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileError(f"Invalid TOML in {path}: {exc}") from None
    section = data.get("tool", {}).get("extpath")
    if section is None:
        logger.debug("No [tool.extpath] section in %s", path)
        return {}
    result = _parse_toml_section(section)
    logger.debug("Loaded %d setting(s) from %s", len(result), path)
    return result


def build_config(
    cli_overrides: dict[str, object],
    file_config: dict[str, object],
) -> SeparatorConfig:
    """Merge file config and CLI overrides into a SeparatorConfig.

    CLI values always win. ``dialect`` selects the base preset (``current``
    by default); every other field overrides that preset and is re-validated
    by SeparatorConfig. With no field overrides the shared preset itself is
    returned.

    Raises:
        SeparatorConfigError: If the merged fields violate a dialect invariant.
    """
    merged: dict[str, object] = {}
    merged.update(file_config)
    merged.update(cli_overrides)

    dialect = str(merged.pop("dialect", "current"))
    base = get_preset(dialect)
    if not merged:
        return base

    separators = merged.get("recognized_separators")
    if separators is not None:
        assert isinstance(separators, tuple)
        merged["recognized_separators"] = separators_from(separators)
    logger.debug("Overriding %s preset fields: %s", dialect, sorted(merged))
    return dataclasses.replace(base, **merged)
