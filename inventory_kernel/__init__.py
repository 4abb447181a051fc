"""
Inventory Kernel

The product catalog and its stock lifecycle:
- Registration with unique models
- Restock and sale with temporal ordering against the arrival date
- Atomic, non-negative stock updates
- Filtered catalog reads (all, by category, by model, available only)
"""

__version__ = "0.1.0"
