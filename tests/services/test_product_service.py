"""
Tests for the Product model and ProductService.

Covers:
- Registration and duplicate detection
- Restock (quantity increase) and date rules against the stored record
- Sales and stock sufficiency
- Deletion, single and bulk
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from inventory_kernel.domain.values import Category
from inventory_kernel.exceptions import (
    ArrivalDateError,
    EmptyProductStockError,
    InvalidParametersError,
    LowProductStockError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from inventory_kernel.models.product import Product


class TestProductModel:
    """Tests for the Product ORM model."""

    def test_create_product(self, session):
        """Creates a product row with an identity key and timestamps."""
        product = Product(
            model="Galaxy S23",
            category=Category.SMARTPHONE.value,
            quantity=4,
            details="Android phone",
            selling_price=Decimal("699.99"),
            arrival_date=date(2024, 2, 1),
        )
        session.add(product)
        session.flush()

        assert product.id is not None
        assert product.quantity == 4
        assert "Galaxy S23" in repr(product)

    def test_model_is_unique(self, session):
        for _ in range(2):
            session.add(
                Product(
                    model="Dup",
                    category=Category.LAPTOP.value,
                    quantity=1,
                    selling_price=Decimal("1"),
                    arrival_date=date(2024, 1, 1),
                )
            )
        with pytest.raises(IntegrityError):
            session.flush()

    def test_quantity_cannot_go_negative(self, session):
        session.add(
            Product(
                model="Neg",
                category=Category.LAPTOP.value,
                quantity=-1,
                selling_price=Decimal("1"),
                arrival_date=date(2024, 1, 1),
            )
        )
        with pytest.raises(IntegrityError):
            session.flush()


class TestRegister:
    """Tests for ProductService.register."""

    def test_register_returns_info(self, create_product):
        info = create_product(model="MacBook Air", category=Category.LAPTOP, quantity=3)

        assert info.model == "MacBook Air"
        assert info.category is Category.LAPTOP
        assert info.quantity == 3
        assert info.selling_price == Decimal("799.00")
        assert info.arrival_date == date(2024, 1, 10)

    def test_register_accepts_category_token(self, product_service):
        info = product_service.register(
            "Dyson V15", "Appliance", 2, None, Decimal("649"), date(2024, 3, 1)
        )
        assert info.category is Category.APPLIANCE
        assert info.details is None

    def test_register_unknown_category(self, product_service):
        with pytest.raises(InvalidParametersError):
            product_service.register(
                "Kindle", "Tablet", 2, None, Decimal("99"), date(2024, 3, 1)
            )

    def test_arrival_date_defaults_to_today(self, product_service, deterministic_clock):
        info = product_service.register(
            "Pixel 8", Category.SMARTPHONE, 1, None, Decimal("599")
        )
        assert info.arrival_date == deterministic_clock.today()

    def test_zero_quantity_allowed_at_store(self, create_product):
        """The store accepts what the validation layer would refuse."""
        info = create_product(quantity=0)
        assert info.is_available is False

    def test_duplicate_model(self, create_product):
        create_product(model="iPhone 13")
        with pytest.raises(ProductAlreadyExistsError) as exc_info:
            create_product(model="iPhone 13", quantity=1)
        assert exc_info.value.model == "iPhone 13"
        assert exc_info.value.code == "PRODUCT_ALREADY_EXISTS"

    def test_register_logs_event(self, create_product, captured_logs):
        create_product(model="Logged")
        records = [r for r in captured_logs() if r["message"] == "product_registered"]
        assert len(records) == 1
        assert records[0]["product_model"] == "Logged"


class TestChangeQuantity:
    """Tests for ProductService.change_quantity."""

    def test_adds_delta(self, create_product, product_service):
        create_product(quantity=10)
        assert product_service.change_quantity("iPhone 13", 5, date(2024, 2, 1)) == 15

    def test_date_defaults_to_today(self, create_product, product_service):
        create_product(quantity=1)
        assert product_service.change_quantity("iPhone 13", 1) == 2

    def test_restock_from_zero(self, create_product, product_service):
        create_product(quantity=0)
        assert product_service.change_quantity("iPhone 13", 7) == 7

    def test_on_arrival_date_allowed(self, create_product, product_service):
        create_product(arrival_date=date(2024, 1, 10))
        assert product_service.change_quantity("iPhone 13", 1, date(2024, 1, 10)) == 11

    def test_before_arrival_date(self, create_product, product_service):
        create_product(arrival_date=date(2024, 1, 10))
        with pytest.raises(ArrivalDateError) as exc_info:
            product_service.change_quantity("iPhone 13", 1, date(2024, 1, 9))
        assert exc_info.value.requested_date == "2024-01-09"

    def test_future_date(self, create_product, product_service):
        create_product()
        with pytest.raises(ArrivalDateError):
            product_service.change_quantity("iPhone 13", 1, date(2024, 6, 16))

    def test_arrival_date_not_moved(self, create_product, product_service, product_selector):
        """A restock validates against, but never advances, the arrival date."""
        create_product(arrival_date=date(2024, 1, 10))
        product_service.change_quantity("iPhone 13", 1, date(2024, 5, 1))

        assert product_selector.get("iPhone 13").arrival_date == date(2024, 1, 10)

    def test_unknown_model(self, product_service):
        with pytest.raises(ProductNotFoundError):
            product_service.change_quantity("Ghost", 1)


class TestSell:
    """Tests for ProductService.sell."""

    def test_decrements(self, create_product, product_service):
        create_product(quantity=10)
        assert product_service.sell("iPhone 13", 4, date(2024, 2, 1)) == 6

    def test_sell_everything(self, create_product, product_service):
        create_product(quantity=3)
        assert product_service.sell("iPhone 13", 3) == 0

    def test_empty_stock(self, create_product, product_service):
        create_product(quantity=0)
        with pytest.raises(EmptyProductStockError):
            product_service.sell("iPhone 13", 1)

    def test_low_stock(self, create_product, product_service):
        create_product(quantity=2)
        with pytest.raises(LowProductStockError) as exc_info:
            product_service.sell("iPhone 13", 3)
        assert exc_info.value.requested == 3
        assert exc_info.value.available == 2

    def test_low_stock_leaves_quantity(self, create_product, product_service, product_selector):
        create_product(quantity=2)
        with pytest.raises(LowProductStockError):
            product_service.sell("iPhone 13", 3)
        assert product_selector.get("iPhone 13").quantity == 2

    def test_date_checked_before_stock(self, create_product, product_service):
        create_product(quantity=0, arrival_date=date(2024, 1, 10))
        with pytest.raises(ArrivalDateError):
            product_service.sell("iPhone 13", 1, date(2024, 1, 1))

    def test_future_date(self, create_product, product_service):
        create_product()
        with pytest.raises(ArrivalDateError):
            product_service.sell("iPhone 13", 1, date(2025, 1, 1))

    def test_unknown_model(self, product_service):
        with pytest.raises(ProductNotFoundError):
            product_service.sell("Ghost", 1)

    def test_sale_logs_event(self, create_product, product_service, captured_logs):
        create_product(quantity=5)
        product_service.sell("iPhone 13", 2)
        records = [r for r in captured_logs() if r["message"] == "product_sold"]
        assert records[-1]["new_quantity"] == 3
        assert records[-1]["sell_date"] == "2024-06-15"


class TestDelete:
    """Tests for ProductService.delete_one / delete_all."""

    def test_delete_one(self, create_product, product_service, product_selector):
        create_product(model="A")
        create_product(model="B")
        product_service.delete_one("A")

        assert product_selector.get("A") is None
        assert product_selector.get("B") is not None

    def test_delete_unknown(self, product_service):
        with pytest.raises(ProductNotFoundError):
            product_service.delete_one("Ghost")

    def test_delete_all(self, create_product, product_service, product_selector):
        create_product(model="A")
        create_product(model="B")

        assert product_service.delete_all() == 2
        assert product_selector.get("A") is None

    def test_delete_all_empty(self, product_service):
        assert product_service.delete_all() == 0

    def test_model_reusable_after_delete(self, create_product, product_service):
        create_product(model="A")
        product_service.delete_one("A")
        assert create_product(model="A").model == "A"
