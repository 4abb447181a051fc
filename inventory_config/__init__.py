"""
inventory_config -- single public entrypoint for runtime configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``.  No other component reads configuration
    files or environment variables directly.

Architecture position:
    Configuration.  Sits above ``inventory_kernel`` and below
    ``inventory_services``.  The kernel MUST NEVER import from
    ``inventory_config``.

Failure modes:
    - ``FileNotFoundError`` -- the requested configuration file is missing.
    - ``ValueError`` -- a value has the wrong type or is unusable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path

from inventory_config.loader import load_yaml_file, parse_config
from inventory_config.schema import (
    CatalogConfig,
    DatabaseConfig,
    InventoryConfig,
    LoggingConfig,
)

_logger = logging.getLogger("inventory_kernel.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

ENV_DATABASE_URL = "INVENTORY_DATABASE_URL"
ENV_LOG_LEVEL = "INVENTORY_LOG_LEVEL"


def get_active_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> InventoryConfig:
    """The ONLY public configuration entrypoint.

    Loads ``config_path`` (default: the packaged ``defaults.yaml``), then
    applies environment overrides.

    Args:
        config_path: YAML file to load.
        env: Environment mapping for overrides.  Defaults to ``os.environ``.

    Returns:
        A frozen InventoryConfig.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        ValueError: If the configuration is invalid.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    config = parse_config(load_yaml_file(path))
    config = _apply_env_overrides(config, os.environ if env is None else env)

    _logger.info(
        "INVENTORY_CONFIG_TRACE",
        extra={
            "trace_type": "INVENTORY_CONFIG_TRACE",
            "config_path": str(path),
            "database_dialect": config.database.url.split(":", 1)[0],
            "log_level": config.logging.level,
        },
    )
    return config


def _apply_env_overrides(
    config: InventoryConfig, env: Mapping[str, str]
) -> InventoryConfig:
    database_url = env.get(ENV_DATABASE_URL)
    if database_url:
        config = replace(config, database=replace(config.database, url=database_url))

    log_level = env.get(ENV_LOG_LEVEL)
    if log_level:
        level = log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level in {ENV_LOG_LEVEL}: {log_level}")
        config = replace(config, logging=LoggingConfig(level=level))

    return config


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_DATABASE_URL",
    "ENV_LOG_LEVEL",
    "CatalogConfig",
    "DatabaseConfig",
    "InventoryConfig",
    "LoggingConfig",
    "get_active_config",
]
