"""
Configuration Loader (``inventory_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into the typed
``inventory_config.schema`` dataclasses.  The single public entry point
for runtime config is ``inventory_config.get_active_config()``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Wrong value types or an unusable placeholder -> ``ValueError``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from inventory_config.schema import (
    CatalogConfig,
    DatabaseConfig,
    InventoryConfig,
    LoggingConfig,
)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Configuration section '{name}' must be a mapping")
    return section


def _typed(section: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = section.get(key, default)
    # bool is an int subclass
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"'{key}' must be {kind.__name__}, got {value!r}")
    return value


def parse_database(data: dict[str, Any]) -> DatabaseConfig:
    defaults = DatabaseConfig()
    return DatabaseConfig(
        url=_typed(data, "url", str, defaults.url),
        echo=_typed(data, "echo", bool, defaults.echo),
        pool_size=_typed(data, "pool_size", int, defaults.pool_size),
        max_overflow=_typed(data, "max_overflow", int, defaults.max_overflow),
    )


def parse_logging(data: dict[str, Any]) -> LoggingConfig:
    level = _typed(data, "level", str, LoggingConfig().level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level}")
    return LoggingConfig(level=level)


def parse_catalog(data: dict[str, Any]) -> CatalogConfig:
    placeholder = _typed(
        data, "details_placeholder", str, CatalogConfig().details_placeholder
    )
    if "{model}" not in placeholder:
        raise ValueError("details_placeholder must reference {model}")
    try:
        placeholder.format(model="")
    except (IndexError, KeyError, ValueError) as exc:
        raise ValueError(f"details_placeholder is not a valid template: {exc}")
    return CatalogConfig(details_placeholder=placeholder)


def parse_config(data: dict[str, Any]) -> InventoryConfig:
    """
    Parse an ``InventoryConfig`` from a dict.

    Missing sections and keys take the schema defaults.

    Raises:
        ValueError: if a value has the wrong type or is unusable.
    """
    return InventoryConfig(
        database=parse_database(_section(data, "database")),
        logging=parse_logging(_section(data, "logging")),
        catalog=parse_catalog(_section(data, "catalog")),
    )
