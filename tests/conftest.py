"""
Pytest fixtures and configuration for the order placement tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2025-10-17
"""
import pytest
import os
from decimal import Decimal
from dotenv import load_dotenv
import psycopg2
from psycopg2.extras import RealDictCursor

from orderdesk.domain.customer import Customer
from orderdesk.domain.product import Product
from orderdesk.repositories.memory import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
)
from orderdesk.services.create_order_service import CreateOrderService

# Load environment variables for tests
load_dotenv()


@pytest.fixture(scope="session")
def database_url():
    """
    Provides the database URL for integration tests

    Scope: session (created once per test session)
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        pytest.skip("DATABASE_URL not configured")
    return url


@pytest.fixture(scope="function")
def db_connection(database_url):
    """
    Provides a fresh database connection for each test

    Scope: function (new connection per test)
    Automatically closes connection after test
    """
    conn = psycopg2.connect(database_url, cursor_factory=RealDictCursor)
    yield conn
    conn.close()


@pytest.fixture
def sample_customer():
    """Provides the customer "C1" """
    return Customer(id="C1", name="Ada Lovelace", email="ada@example.com")


@pytest.fixture
def sample_products():
    """
    Provides a small catalog:
    - P1: price 10.00, stock 5
    - P2: price 2.50, stock 10
    """
    return [
        Product(id="P1", name="Keto Bar", price=Decimal("10.00"), quantity=5),
        Product(id="P2", name="Granola", price=Decimal("2.50"), quantity=10),
    ]


@pytest.fixture
def customers_repository(sample_customer):
    return InMemoryCustomerRepository([sample_customer])


@pytest.fixture
def products_repository(sample_products):
    return InMemoryProductRepository(sample_products)


@pytest.fixture
def orders_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def service(orders_repository, products_repository, customers_repository):
    """Provides a CreateOrderService wired to in-memory stores"""
    return CreateOrderService(orders_repository, products_repository, customers_repository)
