"""Parse and apply the ``extdemo.yaml`` build configuration.

The file maps extension names to field values::

    hello:
      alpha: 5
      bravo: 6
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from extdemo.types import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "extdemo.yaml"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _field_types(extension: Any) -> dict[str, str]:
    """Map each configurable field of a dataclass extension to its type name."""
    computed = getattr(extension, "COMPUTED_FIELDS", ())
    result: dict[str, str] = {}
    for f in dataclasses.fields(extension):
        if f.name in computed:
            continue
        result[f.name] = f.type if isinstance(f.type, str) else f.type.__name__
    return result


def _check_value(section: str, key: str, type_name: str, value: Any) -> None:
    if type_name == "int" and (isinstance(value, bool) or not isinstance(value, int)):
        raise ConfigError(
            f"{section}.{key} must be an integer, got {type(value).__name__}: {value!r}"
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def check_settings(extension: Any, values: Mapping[str, Any], section: str = "") -> None:
    """Validate *values* against the fields of *extension* without setting them.

    Raises:
        ConfigError: If the extension is not a dataclass instance, or a field
            is unknown, computed, or has the wrong type.
    """
    section = section or type(extension).__name__
    if not dataclasses.is_dataclass(extension) or isinstance(extension, type):
        raise ConfigError(f"{section} cannot be configured")
    if not isinstance(values, Mapping):
        raise ConfigError(f"Expected a mapping for '{section}', got {type(values).__name__}")

    computed = getattr(extension, "COMPUTED_FIELDS", ())
    types = _field_types(extension)
    for key, value in values.items():
        if key in computed:
            raise ConfigError(f"{section}.{key} is computed and cannot be configured")
        if key not in types:
            raise ConfigError(f"Unknown setting {section}.{key}")
        _check_value(section, key, types[key], value)


def apply_settings(extension: Any, values: Mapping[str, Any], section: str = "") -> None:
    """Set fields of *extension* from *values*.

    Nothing is set unless every value passes :func:`check_settings`.

    Args:
        extension: A dataclass extension instance, e.g. :class:`HelloExtension`.
        values: Field name to value mapping.
        section: Extension name, used in error messages.

    Raises:
        ConfigError: If a field is unknown, computed, or has the wrong type.
    """
    section = section or type(extension).__name__
    check_settings(extension, values, section)
    for key, value in values.items():
        setattr(extension, key, value)
        logger.debug("Configured %s.%s = %r", section, key, value)


def load_build_config(path: str | Path = DEFAULT_CONFIG_FILE) -> dict[str, dict[str, Any]]:
    """Load and parse a build configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Mapping of extension name to field values.

    Raises:
        ConfigError: If the file is missing or malformed.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Configuration file not found: {p}")

    try:
        with open(p, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {p}, got {type(data).__name__}")

    settings: dict[str, dict[str, Any]] = {}
    for name, section in data.items():
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(
                f"Expected a mapping for '{name}' in {p}, got {type(section).__name__}"
            )
        settings[str(name)] = section
    logger.debug("Loaded %d section(s) from %s", len(settings), p)
    return settings


def save_build_config(settings: Mapping[str, Mapping[str, Any]],
                      path: str | Path = DEFAULT_CONFIG_FILE) -> None:
    """Write *settings* to a build configuration file."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    data = {name: dict(values) for name, values in settings.items()}
    with open(p, "w", encoding="utf-8") as fh:
        yaml.dump(data, fh, default_flow_style=False, allow_unicode=True, sort_keys=False)


def extension_settings(extension: Any) -> dict[str, Any]:
    """Return the current field values of a dataclass extension."""
    return dataclasses.asdict(extension)
