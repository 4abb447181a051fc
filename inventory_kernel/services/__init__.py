"""Kernel write services."""

from inventory_kernel.services.base import BaseService
from inventory_kernel.services.product_service import ProductService

__all__ = [
    "BaseService",
    "ProductService",
]
