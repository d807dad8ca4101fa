"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities
and the structured errors of order placement.

Author: TM3
Date: 2025-10-17
"""
from orderdesk.domain.customer import Customer
from orderdesk.domain.product import Product
from orderdesk.domain.order import Order, OrderCreate, OrderLine, OrderProductRequest
from orderdesk.domain.errors import (
    OrderCreationError,
    OrderError,
    OrderErrorKind,
    RepositoryError,
)

__all__ = [
    'Customer',
    'Product',
    'Order',
    'OrderCreate',
    'OrderLine',
    'OrderProductRequest',
    'OrderCreationError',
    'OrderError',
    'OrderErrorKind',
    'RepositoryError',
]
