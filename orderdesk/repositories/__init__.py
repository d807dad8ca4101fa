"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: TM3
Date: 2025-10-17
"""
from orderdesk.repositories.interfaces import (
    CustomersRepository,
    OrdersRepository,
    ProductsRepository,
)
from orderdesk.repositories.customer_repository import CustomerRepository
from orderdesk.repositories.product_repository import ProductRepository
from orderdesk.repositories.order_repository import OrderRepository
from orderdesk.repositories.unit_of_work import PostgresUnitOfWork
from orderdesk.repositories.memory import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)

__all__ = [
    'CustomersRepository',
    'OrdersRepository',
    'ProductsRepository',
    'CustomerRepository',
    'ProductRepository',
    'OrderRepository',
    'PostgresUnitOfWork',
    'InMemoryCustomerRepository',
    'InMemoryOrderRepository',
    'InMemoryProductRepository',
]
