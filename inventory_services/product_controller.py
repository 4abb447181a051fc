"""
ProductController -- request validation layer in front of the InventoryStore.

Responsibility:
    Turns untyped caller input into typed, normalized arguments, rejects
    malformed requests before any storage access, and forwards the rest to
    the store.  Uses nothing but request shape and the current date.

Architecture position:
    Services -- outermost layer of the inventory core.  Depends on the
    kernel validation helpers and on InventoryStore; holds no state of its
    own beyond its collaborators.

Invariants enforced:
    - Model and details reach the store trimmed; category must be an exact token.
    - Missing details become the catalog placeholder for the model.
    - No date strictly after today is forwarded.
    - Queries select exactly one of the three modes (all, category, model).

Failure modes:
    - InvalidParametersError -- a parameter has the wrong type, range or format.
    - FiltersError -- the query mode selector is inconsistent.
    - ArrivalDateError -- a supplied date is in the future.
    - Store errors propagate unchanged.

Audit relevance:
    Every rejection is logged as ``request_rejected`` with its error code.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from inventory_config.schema import CatalogConfig, InventoryConfig
from inventory_kernel.domain.clock import Clock
from inventory_kernel.domain.dtos import ProductInfo
from inventory_kernel.domain.validation import (
    optional_text,
    parse_iso_date,
    require_category,
    require_not_future,
    require_positive_amount,
    require_positive_int,
    require_text,
    resolve_filter,
)
from inventory_kernel.exceptions import InventoryKernelError
from inventory_kernel.logging_config import LogContext, get_logger
from inventory_services.inventory_store import InventoryStore

logger = get_logger("services.controller")


class ProductController:
    """
    Validating entry point for every catalog operation.

    Contract:
        Receives an InventoryStore, and optionally a Clock (defaults to the
        store's clock) and a CatalogConfig (defaults to the packaged
        placeholder).  Methods return exactly what the store returns.

    Non-goals:
        - Does NOT check anything that needs the stored record (duplicates,
          stock, ordering against the arrival date); the store does.
    """

    def __init__(
        self,
        store: InventoryStore,
        clock: Clock | None = None,
        catalog: CatalogConfig | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or store.clock
        self._catalog = catalog or CatalogConfig()

    @contextmanager
    def _validating(self, operation: str, model: Any = None) -> Iterator[None]:
        key = model.strip() if isinstance(model, str) else None
        with LogContext.bind(operation=operation, model=key or None):
            try:
                yield
            except InventoryKernelError as exc:
                logger.warning(
                    "request_rejected",
                    extra={"error_code": exc.code, "reason": str(exc)},
                )
                raise

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def register(
        self,
        model: Any,
        category: Any,
        quantity: Any,
        details: Any,
        selling_price: Any,
        arrival_date: Any = None,
    ) -> bool:
        """
        Validate and register a new product.

        Args:
            model: Non-blank model key.
            category: "Smartphone", "Laptop" or "Appliance".
            quantity: Positive integer initial stock.
            details: Optional non-blank description; None or "" selects the
                catalog placeholder, built from the trimmed model.
            selling_price: Positive finite unit price.
            arrival_date: Optional ``YYYY-MM-DD`` date, not after today; None or
                "" means today.

        Returns:
            True once the product is stored.

        Raises:
            InvalidParametersError: On any malformed parameter.
            ArrivalDateError: If arrival_date is after today.
            ProductAlreadyExistsError: From the store.
        """
        with self._validating("register", model):
            model = require_text(model, "model")
            member = require_category(category)
            quantity = require_positive_int(quantity, "quantity")
            details = optional_text(details, "details")
            price = require_positive_amount(selling_price, "selling_price")
            arrival = parse_iso_date(arrival_date, "arrival_date")
            today = self._clock.today()
            require_not_future(arrival, today, model)

            return self._store.register(
                model,
                member,
                quantity,
                details if details is not None else self._catalog.default_details(model),
                price,
                arrival or today,
            )

    def change_quantity(self, model: Any, delta: Any, change_date: Any = None) -> int:
        """
        Validate and restock a product by ``delta`` units.

        Returns:
            The new quantity.

        Raises:
            InvalidParametersError: On a blank model, a non-positive delta or
                a malformed date.
            ArrivalDateError: If change_date is after today, or (from the
                store) before the stored arrival date.
            ProductNotFoundError: From the store.
        """
        with self._validating("change_quantity", model):
            model = require_text(model, "model")
            delta = require_positive_int(delta, "quantity")
            day = parse_iso_date(change_date, "change_date")
            require_not_future(day, self._clock.today(), model)
            return self._store.change_quantity(model, delta, day)

    def sell(self, model: Any, quantity: Any, sell_date: Any = None) -> int:
        """
        Validate and record a sale.

        Returns:
            The new quantity.

        Raises:
            InvalidParametersError: On a blank model, a non-positive quantity
                or a malformed date.
            ArrivalDateError: If sell_date is after today, or (from the store)
                before the stored arrival date.
            ProductNotFoundError, EmptyProductStockError,
            LowProductStockError: From the store.
        """
        with self._validating("sell", model):
            model = require_text(model, "model")
            quantity = require_positive_int(quantity, "quantity")
            day = parse_iso_date(sell_date, "selling_date")
            require_not_future(day, self._clock.today(), model)
            return self._store.sell(model, quantity, day)

    def delete(self, model: Any) -> bool:
        """Validate and delete one product."""
        with self._validating("delete", model):
            return self._store.delete_one(require_text(model, "model"))

    def delete_all(self) -> bool:
        with self._validating("delete_all"):
            return self._store.delete_all()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def query(
        self,
        grouping: Any = None,
        category: Any = None,
        model: Any = None,
    ) -> list[ProductInfo]:
        """
        Return products for one of the three query modes.

        Raises:
            FiltersError: If the mode selector is inconsistent.
            ProductNotFoundError: From the store, for an unknown model.
        """
        with self._validating("query"):
            return self._store.query(resolve_filter(grouping, category, model))

    def query_available(
        self,
        grouping: Any = None,
        category: Any = None,
        model: Any = None,
    ) -> list[ProductInfo]:
        """
        Like query(), restricted to products with stock.

        Raises:
            FiltersError: If the mode selector is inconsistent.
            ProductNotFoundError, EmptyProductStockError: From the store,
                for model lookups.
        """
        with self._validating("query_available"):
            return self._store.query_available(
                resolve_filter(grouping, category, model)
            )


def create_product_controller(
    config: InventoryConfig | None = None,
    clock: Clock | None = None,
    create_schema: bool = True,
) -> ProductController:
    """Build a ProductController from config (single entrypoint for production).

    Loads config via get_active_config() unless one is given, configures
    structured logging, initializes the engine, optionally creates the
    schema, and wires store and controller around one clock.

    Args:
        config: Runtime configuration.  Defaults to get_active_config().
        clock: Optional clock; default SystemClock.
        create_schema: If True, create missing tables.

    Returns:
        ProductController over a store bound to the configured database.
    """
    from inventory_config import get_active_config
    from inventory_kernel.db.engine import (
        create_tables,
        get_session_factory,
        init_engine_from_url,
    )
    from inventory_kernel.logging_config import configure_logging

    config = config or get_active_config()
    configure_logging(level=config.logging.level)
    init_engine_from_url(
        config.database.url,
        echo=config.database.echo,
        pool_size=config.database.pool_size,
        max_overflow=config.database.max_overflow,
    )
    if create_schema:
        create_tables()

    store = InventoryStore(get_session_factory(), clock)
    return ProductController(store, catalog=config.catalog)
