"""
Repository interfaces (ports) consumed by the order placement service

Concrete stores (PostgreSQL, in-memory) implement these. Every method may
raise RepositoryError when the store cannot complete the call.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from orderdesk.domain.customer import Customer
from orderdesk.domain.order import Order, OrderCreate
from orderdesk.domain.product import Product


class CustomersRepository(ABC):

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Optional[Customer]: ...


class ProductsRepository(ABC):

    @abstractmethod
    def find_all_by_id(self, product_ids: Iterable[str]) -> List[Product]:
        """
        Resolve many product IDs in a single round trip

        Unknown IDs are silently left out of the result.
        """

    def normalize_id(self, product_id: str) -> str:
        """
        Spell a product ID the way find_all_by_id reports it

        Stores whose keys have several textual spellings (UUIDs) override this;
        the default is the ID unchanged.
        """
        return product_id

    @abstractmethod
    def update_quantity(self, products: List[Product]) -> None:
        """
        Persist the available quantity of every given product

        All-or-none: either every quantity is written or none is.
        """


class OrdersRepository(ABC):

    @abstractmethod
    def create(self, data: OrderCreate) -> Order:
        """Persist an order header together with its lines"""
