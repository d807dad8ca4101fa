"""
PostgreSQL unit of work

Shares one connection (one transaction) between the customer, product and
order repositories, so stock decrements and the order insert are committed
or rolled back together.

Usage:
    with PostgresUnitOfWork() as uow:
        ...
        uow.commit()

Leaving the block without commit() rolls the transaction back.
"""
import logging
from typing import Optional

import psycopg2

from orderdesk.core.database import (
    DatabaseNotConfiguredError,
    get_db_connection_dict_with_retry,
    rollback_quietly,
)
from orderdesk.domain.errors import RepositoryError
from orderdesk.repositories.customer_repository import CustomerRepository
from orderdesk.repositories.order_repository import OrderRepository
from orderdesk.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:

    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url
        self.conn = None
        self._committed = False

    def __enter__(self) -> "PostgresUnitOfWork":
        try:
            self.conn = get_db_connection_dict_with_retry(self.database_url)
        except (psycopg2.Error, DatabaseNotConfiguredError) as e:
            raise RepositoryError(f"could not connect: {e}") from e

        self.customers = CustomerRepository(self.conn)
        self.products = ProductRepository(self.conn, lock_rows=True)
        self.orders = OrderRepository(self.conn)
        return self

    def commit(self) -> None:
        try:
            self.conn.commit()
        except psycopg2.Error as e:
            logger.error(f"Commit failed: {e}")
            raise RepositoryError(f"could not commit: {e}") from e
        self._committed = True

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if not self._committed:
                rollback_quietly(self.conn)
        finally:
            self.conn.close()
