"""
Unit tests for the in-memory stores

Author: TM3
Date: 2025-10-17
"""
import pytest
from decimal import Decimal

from orderdesk.domain.customer import Customer
from orderdesk.domain.errors import RepositoryError
from orderdesk.domain.order import OrderCreate, OrderLine
from orderdesk.domain.product import Product
from orderdesk.repositories.memory import InMemoryOrderRepository, InMemoryProductRepository


class TestInMemoryProductRepository:
    """Test InMemoryProductRepository"""

    def test_find_all_by_id_skips_unknown_ids(self, products_repository):
        products = products_repository.find_all_by_id(["P2", "P9", "P1", "P2"])

        assert [p.id for p in products] == ["P2", "P1"]

    def test_returned_products_are_copies(self, products_repository):
        product = products_repository.find_all_by_id(["P1"])[0]
        product.quantity = 0

        assert products_repository.get("P1").quantity == 5

    def test_update_quantity_is_all_or_none(self, products_repository):
        """An unknown product aborts the whole update"""
        with pytest.raises(RepositoryError):
            products_repository.update_quantity([
                Product(id="P1", name="Keto Bar", price=Decimal("10.00"), quantity=1),
                Product(id="P9", name="Ghost", price=Decimal("1.00"), quantity=1),
            ])

        assert products_repository.get("P1").quantity == 5

    def test_update_quantity_keeps_price(self, products_repository):
        products_repository.update_quantity([
            Product(id="P1", name="Keto Bar", price=Decimal("99.00"), quantity=1),
        ])

        product = products_repository.get("P1")
        assert product.quantity == 1
        assert product.price == Decimal("10.00")
        assert product.updated_at is not None

    def test_fail_on(self, sample_products):
        repo = InMemoryProductRepository(sample_products, fail_on={"find_all_by_id"})

        with pytest.raises(RepositoryError):
            repo.find_all_by_id(["P1"])


class TestInMemoryOrderRepository:
    """Test InMemoryOrderRepository"""

    def test_create_assigns_id(self):
        repo = InMemoryOrderRepository()
        data = OrderCreate(
            customer=Customer(id="C1", name="Ada Lovelace"),
            products=[OrderLine(product_id="P1", quantity=1, price=Decimal("10.00"))],
        )

        first = repo.create(data)
        second = repo.create(data)

        assert first.id != second.id
        assert set(repo.orders) == {first.id, second.id}
        assert first.products == data.products
