"""
Pure domain layer.

This module contains pure data transfer objects, value types and
validation helpers with NO dependencies on:
- ORM (SQLAlchemy)
- Database
- I/O

Time is only read through an injected Clock.
"""

from inventory_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from inventory_kernel.domain.dtos import ProductInfo
from inventory_kernel.domain.values import (
    AllProducts,
    ByCategory,
    ByModel,
    Category,
    Grouping,
    ProductFilter,
)

__all__ = [
    "Clock",
    "DeterministicClock",
    "SystemClock",
    "ProductInfo",
    "AllProducts",
    "ByCategory",
    "ByModel",
    "Category",
    "Grouping",
    "ProductFilter",
]
