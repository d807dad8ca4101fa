"""
In-memory stores

Dictionary-backed implementations of the repository interfaces, used for
local runs and tests. Values handed out are copies, so callers can never
alter stored state except through update_quantity.

Operations named in `fail_on` raise RepositoryError, which lets callers
exercise store outages.
"""
import uuid
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from orderdesk.domain.customer import Customer
from orderdesk.domain.errors import RepositoryError
from orderdesk.domain.order import Order, OrderCreate
from orderdesk.domain.product import Product
from orderdesk.repositories.interfaces import (
    CustomersRepository,
    OrdersRepository,
    ProductsRepository,
)


class _FailureSwitch:

    def __init__(self, fail_on: Optional[Iterable[str]] = None):
        self.fail_on = set(fail_on or ())

    def _check(self, operation: str) -> None:
        if operation in self.fail_on:
            raise RepositoryError(f"{operation} unavailable")


class InMemoryCustomerRepository(_FailureSwitch, CustomersRepository):

    def __init__(self, customers: Iterable[Customer] = (), fail_on=None):
        super().__init__(fail_on)
        self.customers: Dict[str, Customer] = {c.id: c for c in customers}

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        self._check("find_by_id")
        return self.customers.get(customer_id)


class InMemoryProductRepository(_FailureSwitch, ProductsRepository):

    def __init__(self, products: Iterable[Product] = (), fail_on=None):
        super().__init__(fail_on)
        self.products: Dict[str, Product] = {p.id: p for p in products}

    def get(self, product_id: str) -> Optional[Product]:
        product = self.products.get(product_id)
        return product.model_copy() if product else None

    def find_all_by_id(self, product_ids: Iterable[str]) -> List[Product]:
        self._check("find_all_by_id")
        return [
            self.products[product_id].model_copy()
            for product_id in dict.fromkeys(product_ids)
            if product_id in self.products
        ]

    def update_quantity(self, products: List[Product]) -> None:
        self._check("update_quantity")

        missing = [p.id for p in products if p.id not in self.products]
        if missing:
            raise RepositoryError(f"unknown products: {', '.join(missing)}")

        now = datetime.now(timezone.utc)
        for product in products:
            self.products[product.id] = self.products[product.id].model_copy(
                update={'quantity': product.quantity, 'updated_at': now}
            )


class InMemoryOrderRepository(_FailureSwitch, OrdersRepository):

    def __init__(self, fail_on=None):
        super().__init__(fail_on)
        self.orders: Dict[str, Order] = {}

    def create(self, data: OrderCreate) -> Order:
        self._check("create")

        order = Order(
            id=str(uuid.uuid4()),
            customer=data.customer,
            products=list(data.products),
            created_at=datetime.now(timezone.utc),
        )
        self.orders[order.id] = order
        return order
