"""Read-only selectors over catalog data."""

from inventory_kernel.selectors.base import BaseSelector
from inventory_kernel.selectors.product_selector import ProductSelector

__all__ = [
    "BaseSelector",
    "ProductSelector",
]
