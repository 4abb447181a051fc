"""
Values -- Immutable domain value objects for the product catalog.

Responsibility:
    Provides the closed enumerations (Category, Grouping) and the query
    filter variants (AllProducts, ByCategory, ByModel) that replace the
    free-string selectors of a request.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - A ProductFilter is exactly one of three variants, so "both category
      and model" cannot be represented.
    - ByCategory always holds a Category member; ByModel always holds a
      non-blank, trimmed model.

Failure modes:
    - FiltersError when a ByCategory/ByModel is built from a value that
      cannot identify a category or model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from inventory_kernel.exceptions import FiltersError


class Category(str, Enum):
    """Fixed catalog categories.

    Contract: Every Product has exactly one Category.  Values are the
    exact tokens callers send.
    """

    SMARTPHONE = "Smartphone"
    LAPTOP = "Laptop"
    APPLIANCE = "Appliance"

    @classmethod
    def lookup(cls, value: Any) -> Category | None:
        """Return the member for ``value`` (member or exact token), else None."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


class Grouping(str, Enum):
    """Query mode selector tokens."""

    CATEGORY = "category"
    MODEL = "model"


@dataclass(frozen=True, slots=True)
class AllProducts:
    """Select every stored product."""


@dataclass(frozen=True, slots=True)
class ByCategory:
    """Select the products of one category."""

    category: Category

    def __post_init__(self) -> None:
        member = Category.lookup(self.category)
        if member is None:
            raise FiltersError(Grouping.CATEGORY.value, str(self.category), None)
        object.__setattr__(self, "category", member)


@dataclass(frozen=True, slots=True)
class ByModel:
    """Select the single product with this model."""

    model: str

    def __post_init__(self) -> None:
        if not isinstance(self.model, str) or not self.model.strip():
            raise FiltersError(Grouping.MODEL.value, None, self.model)
        object.__setattr__(self, "model", self.model.strip())


ProductFilter = Union[AllProducts, ByCategory, ByModel]
