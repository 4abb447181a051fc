"""
Lightweight domain validation helpers.

Pure checks with no I/O. Used by the request validation layer to turn
untyped caller input into typed, normalized values, raising the kernel's
typed errors on the first violation.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from inventory_kernel.domain.values import (
    AllProducts,
    ByCategory,
    ByModel,
    Category,
    Grouping,
    ProductFilter,
)
from inventory_kernel.exceptions import (
    ArrivalDateError,
    FiltersError,
    InvalidParametersError,
)

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_blank(value: Any) -> bool:
    """None and whitespace-only strings count as "not supplied"."""
    return value is None or (isinstance(value, str) and not value.strip())


def require_text(value: Any, name: str) -> str:
    """Return ``value`` trimmed; it must be a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidParametersError(name, "must be a non-empty string")
    return value.strip()


def optional_text(value: Any, name: str) -> str | None:
    """Like require_text, but None and "" mean "not supplied"."""
    if value is None or value == "":
        return None
    return require_text(value, name)


def require_positive_int(value: Any, name: str) -> int:
    """Return ``value`` if it is an int greater than zero (bool rejected)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidParametersError(name, "must be a positive integer")
    return value


def require_positive_amount(value: Any, name: str) -> Decimal:
    """Return ``value`` as a Decimal; it must be a finite number above zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidParametersError(name, "must be a number")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidParametersError(name, "must be a finite number")
        amount = Decimal(str(value))
    else:
        try:
            amount = Decimal(value)
        except InvalidOperation:
            raise InvalidParametersError(name, "must be a number")
    if not amount.is_finite() or amount <= 0:
        raise InvalidParametersError(name, "must be greater than zero")
    return amount


def require_category(value: Any, name: str = "category") -> Category:
    category = Category.lookup(value)
    if category is None:
        allowed = ", ".join(c.value for c in Category)
        raise InvalidParametersError(name, f"must be one of {allowed}")
    return category


def parse_iso_date(value: Any, name: str) -> date | None:
    """
    Parse an optional ``YYYY-MM-DD`` date.

    Accepts None or "" (not supplied), a ``date`` instance, or a string in the
    exact ISO calendar form.  Datetimes are rejected: a timestamp is not a
    calendar day.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        raise InvalidParametersError(name, "must be a YYYY-MM-DD date")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        raise InvalidParametersError(name, "must be a YYYY-MM-DD date")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidParametersError(name, "must be a valid calendar date")


def require_not_future(day: date | None, today: date, model: str | None) -> None:
    """Reject a date strictly after ``today``."""
    if day is not None and day > today:
        raise ArrivalDateError(model, day.isoformat(), "date is in the future")


def resolve_filter(
    grouping: Any,
    category: Any,
    model: Any,
) -> ProductFilter:
    """
    Map the raw (grouping, category, model) triple onto a ProductFilter.

    Exactly one mode must be selected:
        - nothing supplied                              -> AllProducts
        - grouping="category", valid category, no model -> ByCategory
        - grouping="model", non-blank model, no category -> ByModel

    Raises:
        FiltersError: For every other combination.
    """
    if is_blank(grouping):
        if is_blank(category) and is_blank(model):
            return AllProducts()
        raise FiltersError(grouping, category, model)

    if grouping == Grouping.CATEGORY.value and is_blank(model):
        member = Category.lookup(category)
        if member is not None:
            return ByCategory(member)
    elif grouping == Grouping.MODEL.value and is_blank(category):
        if not is_blank(model):
            return ByModel(model)

    raise FiltersError(grouping, category, model)
