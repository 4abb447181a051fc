"""ORM models for the inventory kernel."""

from inventory_kernel.models.product import Product

__all__ = [
    "Product",
]
