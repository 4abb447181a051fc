"""
inventory_services -- Package init and public API.

Responsibility:
    Stateful orchestration over the inventory kernel: the transactional
    InventoryStore and the request-validating ProductController.  This is
    the only layer that opens database transactions or reads configuration.

Architecture position:
    Services -- outermost layer.

    Dependency direction (enforced by tests/architecture/test_kernel_boundary.py):
        inventory_services/ -> inventory_kernel/  (allowed)
        inventory_services/ -> inventory_config/  (allowed)
        inventory_kernel/   -> inventory_services/ (FORBIDDEN)
        inventory_kernel/   -> inventory_config/   (FORBIDDEN)

Failure modes:
    - ImportError at startup if a service's dependency graph is broken.
"""

from inventory_kernel.logging_config import get_logger

logger = get_logger("services")

from inventory_services.inventory_store import InventoryStore
from inventory_services.product_controller import (
    ProductController,
    create_product_controller,
)

__all__ = [
    "InventoryStore",
    "ProductController",
    "create_product_controller",
]
