"""
InventoryStore -- authoritative state transitions and reads for the catalog.

Responsibility:
    Runs every catalog operation as one unit: a fresh session, one
    transaction, commit on success, rollback on any error.  Composes the
    kernel ProductService (writes) and ProductSelector (reads), sharing a
    single injected Clock.

Architecture position:
    Services -- stateful orchestration over the kernel.  This is the layer
    that owns transaction boundaries; kernel services only flush.

Invariants enforced:
    - All-or-nothing: a failed register/change/sell/delete leaves stored
      state exactly as it was.
    - No cross-call transactions: each method commits before returning.

Failure modes:
    - Kernel typed errors (ProductNotFoundError, ArrivalDateError, ...)
      propagate unchanged.
    - Driver/connection errors propagate unchanged as sqlalchemy.exc errors.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session, sessionmaker

from inventory_kernel.db.engine import session_scope
from inventory_kernel.domain.clock import Clock, SystemClock
from inventory_kernel.domain.dtos import ProductInfo
from inventory_kernel.domain.values import AllProducts, Category, ProductFilter
from inventory_kernel.selectors.product_selector import ProductSelector
from inventory_kernel.services.product_service import ProductService


class InventoryStore:
    """Transactional facade over the product service and selector.

    Contract:
        Receives a session factory and an optional Clock.  Every public
        method opens its own transaction.

    Non-goals:
        - Does NOT validate request shape; see ProductController.
        - Does NOT retry; none of its errors are transient.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        clock: Clock | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock or SystemClock()

    @property
    def clock(self) -> Clock:
        """The clock shared by every operation."""
        return self._clock

    def _service(self, session: Session) -> ProductService:
        return ProductService(session, self._clock)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def register(
        self,
        model: str,
        category: Category | str,
        quantity: int,
        details: str | None,
        selling_price: Decimal,
        arrival_date: date | None = None,
    ) -> bool:
        """
        Register a new product.

        Returns:
            True once the product is stored.

        Raises:
            ProductAlreadyExistsError: If the model is already registered.
        """
        with session_scope(self._session_factory) as session:
            self._service(session).register(
                model, category, quantity, details, selling_price, arrival_date
            )
        return True

    def change_quantity(
        self,
        model: str,
        delta: int,
        change_date: date | None = None,
    ) -> int:
        """
        Restock ``model`` by ``delta`` units and return the new quantity.

        The stored arrival date is validated against but never moved.

        Raises:
            ProductNotFoundError: If the model is not registered.
            ArrivalDateError: If change_date is after today or before the
                stored arrival date.
        """
        with session_scope(self._session_factory) as session:
            return self._service(session).change_quantity(model, delta, change_date)

    def sell(
        self,
        model: str,
        quantity: int,
        sell_date: date | None = None,
    ) -> int:
        """
        Sell ``quantity`` units of ``model`` and return the new quantity.

        Raises:
            ProductNotFoundError: If the model is not registered.
            ArrivalDateError: If sell_date is after today or before the
                stored arrival date.
            EmptyProductStockError: If the product has no stock.
            LowProductStockError: If the request exceeds the stock.
        """
        with session_scope(self._session_factory) as session:
            return self._service(session).sell(model, quantity, sell_date)

    def delete_one(self, model: str) -> bool:
        """
        Delete one product.

        Raises:
            ProductNotFoundError: If the model is not registered.
        """
        with session_scope(self._session_factory) as session:
            self._service(session).delete_one(model)
        return True

    def delete_all(self) -> bool:
        """Delete every product.  Always succeeds."""
        with session_scope(self._session_factory) as session:
            self._service(session).delete_all()
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, model: str) -> ProductInfo | None:
        """Return the product stored under ``model``, or None."""
        with session_scope(self._session_factory) as session:
            return ProductSelector(session).get(model)

    def query(self, product_filter: ProductFilter | None = None) -> list[ProductInfo]:
        """
        Return the products selected by ``product_filter`` (default: all).

        Raises:
            ProductNotFoundError: ByModel names an unregistered model.
        """
        with session_scope(self._session_factory) as session:
            return ProductSelector(session).query(product_filter or AllProducts())

    def query_available(
        self, product_filter: ProductFilter | None = None
    ) -> list[ProductInfo]:
        """
        Return the selected products that have stock.

        Raises:
            ProductNotFoundError: ByModel names an unregistered model.
            EmptyProductStockError: ByModel names a product with no stock.
        """
        with session_scope(self._session_factory) as session:
            return ProductSelector(session).query_available(
                product_filter or AllProducts()
            )
