"""
DTOs -- Pure domain data transfer objects.

Responsibility:
    Defines ProductInfo, the immutable snapshot of a stored product that
    every read and write path returns instead of an ORM entity.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    ``from_model()`` is the boundary converter; it is only invoked from the
    service and selector layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from inventory_kernel.domain.values import Category

if TYPE_CHECKING:
    from inventory_kernel.models.product import Product as ProductModel


@dataclass(frozen=True, slots=True)
class ProductInfo:
    """
    Immutable DTO for product data.

    Pure domain object, no ORM dependencies.
    """

    model: str
    category: Category
    quantity: int
    selling_price: Decimal
    arrival_date: date
    details: str | None = None

    @property
    def is_available(self) -> bool:
        """A product is available when at least one unit is in stock."""
        return self.quantity > 0

    @classmethod
    def from_model(cls, model: ProductModel) -> ProductInfo:
        """
        Create a ProductInfo from a Product ORM model.

        Args:
            model: Product ORM model instance.

        Returns:
            ProductInfo DTO.
        """
        return cls(
            model=model.model,
            category=Category(model.category),
            quantity=model.quantity,
            selling_price=Decimal(model.selling_price),
            arrival_date=model.arrival_date,
            details=model.details,
        )

    def as_dict(self) -> dict[str, Any]:
        """Render with the external field names and an ISO arrival date."""
        return {
            "model": self.model,
            "category": self.category.value,
            "quantity": self.quantity,
            "details": self.details,
            "sellingPrice": self.selling_price,
            "arrivalDate": self.arrival_date.isoformat(),
        }
