"""
Module: inventory_kernel.selectors.product_selector
Responsibility: Filtered reads over the product catalog under the three
    mutually-exclusive query modes (all, by category, by model), with and
    without the "available only" restriction.
Architecture position: Kernel > Selectors.  Read-only.

Invariants enforced:
    - "All" results are ordered by insertion (primary key) order.
    - Available results never include a product with quantity 0.
    - A by-model lookup either yields exactly one product or raises:
      ProductNotFoundError when absent, and, for available reads,
      EmptyProductStockError when the product has no stock.
"""

from __future__ import annotations

from sqlalchemy import Select, select

from inventory_kernel.domain.dtos import ProductInfo
from inventory_kernel.domain.values import (
    AllProducts,
    ByCategory,
    ByModel,
    ProductFilter,
)
from inventory_kernel.exceptions import EmptyProductStockError, ProductNotFoundError
from inventory_kernel.models.product import Product
from inventory_kernel.selectors.base import BaseSelector


class ProductSelector(BaseSelector[Product]):
    """Read-only catalog queries returning ProductInfo DTOs."""

    def get(self, model: str) -> ProductInfo | None:
        """Return the product with this model, or None."""
        product = self.session.execute(
            select(Product).where(Product.model == model)
        ).scalar_one_or_none()
        return ProductInfo.from_model(product) if product else None

    def query(self, product_filter: ProductFilter) -> list[ProductInfo]:
        """
        Return the products selected by ``product_filter``.

        Args:
            product_filter: AllProducts, ByCategory or ByModel.

        Returns:
            Matching products in insertion order.

        Raises:
            ProductNotFoundError: ByModel names a model with no record.
        """
        products = self._run(self._statement(product_filter))
        if isinstance(product_filter, ByModel) and not products:
            raise ProductNotFoundError(product_filter.model)
        return products

    def query_available(self, product_filter: ProductFilter) -> list[ProductInfo]:
        """
        Like query(), restricted to products with stock.

        For ByModel the zero-stock record is not filtered out silently:
        the lookup names one product, so the caller is told why it is
        missing.

        Raises:
            ProductNotFoundError: ByModel names a model with no record.
            EmptyProductStockError: ByModel names a product with quantity 0.
        """
        if isinstance(product_filter, ByModel):
            products = self.query(product_filter)
            if not products[0].is_available:
                raise EmptyProductStockError(product_filter.model)
            return products

        stmt = self._statement(product_filter).where(Product.quantity > 0)
        return self._run(stmt)

    @staticmethod
    def _statement(product_filter: ProductFilter) -> Select:
        stmt = select(Product)
        if isinstance(product_filter, ByCategory):
            stmt = stmt.where(Product.category == product_filter.category.value)
        elif isinstance(product_filter, ByModel):
            stmt = stmt.where(Product.model == product_filter.model)
        elif not isinstance(product_filter, AllProducts):
            raise TypeError(f"Unsupported product filter: {product_filter!r}")
        return stmt.order_by(Product.id)

    def _run(self, stmt: Select) -> list[ProductInfo]:
        return [ProductInfo.from_model(p) for p in self.session.execute(stmt).scalars().all()]
