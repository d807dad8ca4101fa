"""
Order Repository - Data Access Layer for Orders

Persists an order header and its lines in the same transaction.

Author: TM3
Date: 2025-10-17
"""
import logging

from psycopg2.extras import execute_values

from orderdesk.domain.order import Order, OrderCreate
from orderdesk.repositories.base import PostgresRepository
from orderdesk.repositories.interfaces import OrdersRepository

logger = logging.getLogger(__name__)


class OrderRepository(PostgresRepository, OrdersRepository):
    """Repository for Order data access"""

    def create(self, data: OrderCreate) -> Order:
        """
        Insert the order header and all of its lines

        Args:
            data: Customer and priced lines

        Returns:
            The persisted Order with generated ID and timestamps
        """
        with self._cursor("create order") as cursor:
            cursor.execute("""
                INSERT INTO orders (customer_id)
                VALUES (%s)
                RETURNING id::text AS id, created_at, updated_at
            """, (data.customer.id,))

            header = cursor.fetchone()

            if data.products:
                execute_values(cursor, """
                    INSERT INTO orders_products (order_id, product_id, price, quantity)
                    VALUES %s
                """, [
                    (header['id'], line.product_id, line.price, line.quantity)
                    for line in data.products
                ])

        logger.info(f"Created order {header['id']} with {len(data.products)} lines")

        return Order(
            id=header['id'],
            customer=data.customer,
            products=list(data.products),
            created_at=header['created_at'],
            updated_at=header['updated_at'],
        )
