"""
Typed Exception Hierarchy for the Inventory Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Every rejection the inventory engine produces is a caller-input or
caller-state problem. Callers must be able to tell them apart without
parsing message strings, so:
  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (not just a message string)

Example - WRONG way to handle errors:
    try:
        store.sell(model, 3, None)
    except Exception as e:
        if "stock" in str(e):  # FRAGILE - message might change
            reorder(model)

Example - RIGHT way:
    try:
        store.sell(model, 3, None)
    except LowProductStockError as e:
        reorder(e.model, e.requested - e.available)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from InventoryKernelError:

    InventoryKernelError (base)
    |
    +-- RequestError
    |   +-- InvalidParametersError
    |   +-- FiltersError
    |
    +-- ProductError
    |   +-- ProductAlreadyExistsError
    |   +-- ProductNotFoundError
    |   +-- ArrivalDateError
    |
    +-- StockError
        +-- EmptyProductStockError
        +-- LowProductStockError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category   | Code                    | When Raised
-----------|-------------------------|--------------------------------------------
Request    | INVALID_PARAMETERS      | Shape/type/range violation (no store access)
           | INVALID_FILTERS         | grouping/category/model not exactly one mode
-----------|-------------------------|--------------------------------------------
Product    | PRODUCT_ALREADY_EXISTS  | Registration collides with existing model
           | PRODUCT_NOT_FOUND       | Referenced model has no record
           | ARRIVAL_DATE_ERROR      | Date in the future, or before arrival date
-----------|-------------------------|--------------------------------------------
Stock      | EMPTY_PRODUCT_STOCK     | Operation requires stock but quantity is 0
           | LOW_PRODUCT_STOCK       | Sale quantity exceeds current stock

===============================================================================
PROPAGATION
===============================================================================

Errors are raised at the point of detection and propagate unchanged through
every layer. Nothing here is retried: none of these are transient. Storage
faults (``sqlalchemy.exc.OperationalError`` and friends) are NOT wrapped and
pass through as-is.
"""


class InventoryKernelError(Exception):
    """
    Base exception for all inventory kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "INVENTORY_KERNEL_ERROR"


# Request-shape exceptions


class RequestError(InventoryKernelError):
    """Base exception for errors detectable without a store lookup."""

    code: str = "REQUEST_ERROR"


class InvalidParametersError(RequestError):
    """Request field has the wrong type, range or format."""

    code: str = "INVALID_PARAMETERS"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid parameter '{field}': {reason}")


class FiltersError(RequestError):
    """
    grouping/category/model do not select exactly one query mode.

    Valid combinations: nothing at all, grouping="category" with a known
    category and no model, or grouping="model" with a model and no category.
    """

    code: str = "INVALID_FILTERS"

    def __init__(
        self,
        grouping: str | None,
        category: str | None,
        model: str | None,
    ):
        self.grouping = grouping
        self.category = category
        self.model = model
        super().__init__(
            f"Invalid filter combination: grouping={grouping!r}, "
            f"category={category!r}, model={model!r}"
        )


# Product-state exceptions


class ProductError(InventoryKernelError):
    """Base exception for errors that depend on the product record."""

    code: str = "PRODUCT_ERROR"


class ProductAlreadyExistsError(ProductError):
    """A product with this model is already registered."""

    code: str = "PRODUCT_ALREADY_EXISTS"

    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Product already exists: {model}")


class ProductNotFoundError(ProductError):
    """No product is registered under this model."""

    code: str = "PRODUCT_NOT_FOUND"

    def __init__(self, model: str | None):
        self.model = model
        super().__init__(f"Product not found: {model}")


class ArrivalDateError(ProductError):
    """
    A supplied date violates temporal ordering.

    Raised when the date is after today, or when a restock/sale date
    precedes the arrival date stored for the product.
    """

    code: str = "ARRIVAL_DATE_ERROR"

    def __init__(self, model: str | None, requested_date: str, reason: str):
        self.model = model
        self.requested_date = requested_date
        self.reason = reason
        super().__init__(
            f"Invalid date {requested_date} for product {model}: {reason}"
        )


# Stock exceptions


class StockError(InventoryKernelError):
    """Base exception for insufficient-stock errors."""

    code: str = "STOCK_ERROR"


class EmptyProductStockError(StockError):
    """Product quantity is zero."""

    code: str = "EMPTY_PRODUCT_STOCK"

    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Product {model} is out of stock")


class LowProductStockError(StockError):
    """Requested quantity exceeds the quantity in stock."""

    code: str = "LOW_PRODUCT_STOCK"

    def __init__(self, model: str, requested: int, available: int):
        self.model = model
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot sell {requested} units of {model}: only {available} in stock"
        )
