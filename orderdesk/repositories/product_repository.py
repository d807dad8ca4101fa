"""
Product Repository - Data Access Layer for Products

Handles the product lookups and stock writes needed to place orders
and returns Product domain models.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Iterable, List

from orderdesk.domain.errors import RepositoryError
from orderdesk.domain.product import Product
from orderdesk.repositories.base import PostgresRepository, canonical_uuid, valid_uuids
from orderdesk.repositories.interfaces import ProductsRepository

logger = logging.getLogger(__name__)


class ProductRepository(PostgresRepository, ProductsRepository):
    """
    Repository for Product data access

    With lock_rows=True the batch lookup takes row locks (SELECT ... FOR UPDATE)
    that are held until the surrounding transaction ends, so concurrent orders
    for the same product check and decrement stock one after the other.
    """

    def __init__(self, conn=None, lock_rows: bool = False):
        super().__init__(conn)
        self.lock_rows = lock_rows

    def normalize_id(self, product_id: str) -> str:
        """Lowercase hyphenated form of a UUID; malformed IDs are returned as given"""
        return canonical_uuid(product_id) or product_id

    def find_all_by_id(self, product_ids: Iterable[str]) -> List[Product]:
        """
        Find every existing product among the given IDs in one query

        Args:
            product_ids: Product UUIDs (unknown or malformed IDs are ignored)

        Returns:
            List of products that exist, ordered by ID, with IDs in canonical form
        """
        ids = valid_uuids(product_ids)
        if not ids:
            return []

        # Locks are taken in ID order to avoid deadlocks between orders
        lock_clause = "FOR UPDATE" if self.lock_rows else ""

        with self._cursor("find products") as cursor:
            cursor.execute(f"""
                SELECT id::text AS id, name, price, quantity, created_at, updated_at
                FROM products
                WHERE id = ANY(%s::uuid[])
                ORDER BY id
                {lock_clause}
            """, (ids,))

            rows = cursor.fetchall()

        return [Product(**row) for row in rows]

    def update_quantity(self, products: List[Product]) -> None:
        """
        Write the available quantity of every given product in one statement

        Args:
            products: Products carrying their new quantities

        Raises:
            RepositoryError: If the statement fails or any product is missing
        """
        if not products:
            return

        ids = [product.id for product in products]
        quantities = [product.quantity for product in products]

        with self._cursor("update product quantities") as cursor:
            cursor.execute("""
                UPDATE products AS p
                SET quantity = v.quantity, updated_at = NOW()
                FROM unnest(%s::uuid[], %s::int[]) AS v(id, quantity)
                WHERE p.id = v.id
            """, (ids, quantities))

            if cursor.rowcount != len(products):
                raise RepositoryError(
                    f"expected to update {len(products)} products, updated {cursor.rowcount}"
                )

        logger.debug(f"Updated stock for {len(products)} products")
