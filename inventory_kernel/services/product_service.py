"""
Service layer for Product writes.

Owns every state transition of a stored product: registration, restock,
sale and deletion.  Enforces the invariants that need the stored record
(duplicate keys, missing keys, dates against the stored arrival date,
stock sufficiency).

Quantity changes are a single conditional UPDATE on the row (compare and
swap on quantity) rather than a read followed by an unconditional write,
so two concurrent sales can never overdraw stock.

Returns ProductInfo DTOs or plain values, never ORM entities.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from inventory_kernel.domain.dtos import ProductInfo
from inventory_kernel.domain.values import Category
from inventory_kernel.exceptions import (
    ArrivalDateError,
    EmptyProductStockError,
    InvalidParametersError,
    LowProductStockError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from inventory_kernel.logging_config import get_logger
from inventory_kernel.models.product import Product
from inventory_kernel.services.base import BaseService

logger = get_logger("services.product")


class ProductService(BaseService[Product]):
    """
    Service for product lifecycle writes.

    All methods flush; the caller commits.  A method that raises leaves
    the session with no pending change to this product, and the caller's
    rollback discards anything flushed before the error.
    """

    def _get_by_model(self, model: str, for_update: bool = False) -> Product:
        """Get product by model, raising if not found."""
        stmt = select(Product).where(Product.model == model)
        if for_update:
            stmt = stmt.with_for_update()
        product = self.session.execute(stmt).scalar_one_or_none()
        if product is None:
            raise ProductNotFoundError(model)
        return product

    def _resolve_event_date(self, product: Product, event_date: date | None) -> date:
        """
        Resolve a restock/sale date and check it against the stored record.

        The date must fall within [arrival_date, today].  The arrival date
        is only read here; no event moves it.
        """
        today = self.clock.today()
        resolved = event_date or today
        if resolved > today:
            raise ArrivalDateError(
                product.model, resolved.isoformat(), "date is in the future"
            )
        if resolved < product.arrival_date:
            raise ArrivalDateError(
                product.model,
                resolved.isoformat(),
                f"date precedes arrival date {product.arrival_date.isoformat()}",
            )
        return resolved

    def register(
        self,
        model: str,
        category: Category,
        quantity: int,
        details: str | None,
        selling_price: Decimal,
        arrival_date: date | None = None,
    ) -> ProductInfo:
        """
        Insert a new product.

        Args:
            model: Unique model key.
            category: Catalog category.
            quantity: Initial stock.
            details: Description, stored as given.
            selling_price: Unit price.
            arrival_date: Day the product entered inventory.  Defaults to today.

        Returns:
            The stored product as a ProductInfo DTO.

        Raises:
            InvalidParametersError: If category is not a Category member.
            ProductAlreadyExistsError: If the model is already registered.
        """
        member = Category.lookup(category)
        if member is None:
            raise InvalidParametersError("category", f"unknown category {category!r}")

        existing = self.session.execute(
            select(Product.id).where(Product.model == model)
        ).first()
        if existing is not None:
            raise ProductAlreadyExistsError(model)

        product = Product(
            model=model,
            category=member.value,
            quantity=quantity,
            details=details,
            selling_price=selling_price,
            arrival_date=arrival_date or self.clock.today(),
        )
        self.session.add(product)
        try:
            self.session.flush()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same model.
            if "uq_product_model" in str(exc.orig) or "UNIQUE" in str(exc.orig):
                raise ProductAlreadyExistsError(model) from exc
            raise

        logger.info(
            "product_registered",
            extra={
                "product_model": model,
                "category": product.category,
                "quantity": quantity,
                "arrival_date": product.arrival_date,
            },
        )
        return ProductInfo.from_model(product)

    def change_quantity(
        self,
        model: str,
        delta: int,
        change_date: date | None = None,
    ) -> int:
        """
        Restock a product by ``delta`` units.

        Args:
            model: Model of the product to restock.
            delta: Units to add (not a new total).
            change_date: Day of the restock.  Defaults to today.

        Returns:
            The new quantity.

        Raises:
            ProductNotFoundError: If the model is not registered.
            ArrivalDateError: If change_date is after today or before the
                stored arrival date.
        """
        product = self._get_by_model(model, for_update=True)
        resolved = self._resolve_event_date(product, change_date)

        self.session.execute(
            update(Product)
            .where(Product.id == product.id)
            .values(quantity=Product.quantity + delta)
            .execution_options(synchronize_session=False)
        )
        self.session.refresh(product)

        logger.info(
            "product_quantity_changed",
            extra={
                "product_model": model,
                "delta": delta,
                "change_date": resolved,
                "new_quantity": product.quantity,
            },
        )
        return product.quantity

    def sell(
        self,
        model: str,
        quantity: int,
        sell_date: date | None = None,
    ) -> int:
        """
        Record the sale of ``quantity`` units.

        Args:
            model: Model of the product sold.
            quantity: Units sold.
            sell_date: Day of the sale.  Defaults to today.

        Returns:
            The new quantity.

        Raises:
            ProductNotFoundError: If the model is not registered.
            ArrivalDateError: If sell_date is after today or before the
                stored arrival date.
            EmptyProductStockError: If the product has no stock.
            LowProductStockError: If fewer than ``quantity`` units are in stock.
        """
        product = self._get_by_model(model, for_update=True)
        resolved = self._resolve_event_date(product, sell_date)
        self._require_stock(product, quantity)

        result = self.session.execute(
            update(Product)
            .where(Product.id == product.id, Product.quantity >= quantity)
            .values(quantity=Product.quantity - quantity)
            .execution_options(synchronize_session=False)
        )
        self.session.refresh(product)
        if result.rowcount != 1:
            # Stock moved between the read and the conditional update.
            self._require_stock(product, quantity)

        logger.info(
            "product_sold",
            extra={
                "product_model": model,
                "quantity_sold": quantity,
                "sell_date": resolved,
                "new_quantity": product.quantity,
            },
        )
        return product.quantity

    @staticmethod
    def _require_stock(product: Product, quantity: int) -> None:
        if product.quantity == 0:
            raise EmptyProductStockError(product.model)
        if quantity > product.quantity:
            raise LowProductStockError(product.model, quantity, product.quantity)

    def delete_one(self, model: str) -> None:
        """
        Remove a product.

        Raises:
            ProductNotFoundError: If the model is not registered.
        """
        product = self._get_by_model(model)
        self.session.delete(product)
        self.session.flush()
        logger.info("product_deleted", extra={"product_model": model})

    def delete_all(self) -> int:
        """
        Remove every product.  Succeeds on an empty catalog.

        Returns:
            Number of products removed.
        """
        result = self.session.execute(
            delete(Product).execution_options(synchronize_session=False)
        )
        self.session.expunge_all()
        logger.info("products_cleared", extra={"removed": result.rowcount})
        return result.rowcount
