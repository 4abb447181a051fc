"""
InventoryConfig schema.

Typed, frozen view of the runtime configuration.  YAML documents are
parsed into these types by the loader; nothing else reads configuration
files.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_DETAILS_PLACEHOLDER = "BUY YOUR {model} NOW!"


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection settings passed to init_engine_from_url()."""

    url: str = "sqlite:///inventory.db"
    echo: bool = False
    pool_size: int = 20
    max_overflow: int = 10


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class CatalogConfig:
    """Catalog defaults applied by the request validation layer."""

    details_placeholder: str = DEFAULT_DETAILS_PLACEHOLDER

    def default_details(self, model: str) -> str:
        """Placeholder description for a product registered without details."""
        return self.details_placeholder.format(model=model)


@dataclass(frozen=True)
class InventoryConfig:
    """Root configuration object."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
