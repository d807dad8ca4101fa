"""
Customer Repository - Data Access Layer for Customers

Author: TM3
Date: 2025-10-17
"""
from typing import Optional

from orderdesk.domain.customer import Customer
from orderdesk.repositories.base import PostgresRepository, canonical_uuid
from orderdesk.repositories.interfaces import CustomersRepository


class CustomerRepository(PostgresRepository, CustomersRepository):
    """
    Repository for Customer data access

    Read-only: customers are managed elsewhere.
    """

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find customer by ID

        Args:
            customer_id: Customer UUID

        Returns:
            Customer or None if not found
        """
        key = canonical_uuid(customer_id)
        if key is None:
            return None

        with self._cursor("find customer") as cursor:
            cursor.execute("""
                SELECT id::text AS id, name, email, created_at, updated_at
                FROM customers
                WHERE id = %s
            """, (key,))

            row = cursor.fetchone()

        if not row:
            return None

        return Customer(**row)
