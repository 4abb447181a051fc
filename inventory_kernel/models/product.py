"""
Module: inventory_kernel.models.product
Responsibility: ORM persistence for catalog products -- one row per product
    model, holding its category, stock quantity, price and arrival date.
Architecture position: Kernel > Models.  May import from db/base.py only.
    MUST NOT import from services/, selectors/, domain/, or outer layers.

Invariants enforced:
    - model is globally unique (uq_product_model).
    - quantity is never negative (ck_product_quantity_non_negative); a sale
      that would overdraw stock is rejected by the database even if a caller
      bypasses the service layer.
    - selling_price is strictly positive (ck_product_selling_price_positive).

Failure modes:
    - IntegrityError on duplicate model or on a constraint violation.
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from inventory_kernel.db.base import TrackedBase


class Product(TrackedBase):
    """
    A catalog line item and its current stock.

    Contract:
        Each Product has a unique model.  quantity changes only through
        restock and sale; arrival_date is set once at registration and is
        the floor for every later restock or sale date.

    Non-goals:
        - This model does NOT validate dates against the clock; that is the
          responsibility of the service layer.
        - No history of quantity changes is kept.
    """

    __tablename__ = "products"

    __table_args__ = (
        UniqueConstraint("model", name="uq_product_model"),
        CheckConstraint("quantity >= 0", name="ck_product_quantity_non_negative"),
        CheckConstraint("selling_price > 0", name="ck_product_selling_price_positive"),
        Index("idx_product_category", "category"),
    )

    # Unique business identifier
    model: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Category token (see inventory_kernel.domain.values.Category)
    category: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )

    quantity: Mapped[int] = mapped_column(
        nullable=False,
        default=0,
    )

    selling_price: Mapped[Decimal] = mapped_column(
        nullable=False,
    )

    details: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    arrival_date: Mapped[date] = mapped_column(
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Product {self.model} ({self.category}) qty={self.quantity}>"
