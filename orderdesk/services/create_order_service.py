"""
Create Order Service
Places an order: validates the request, decrements stock and persists
the order with its priced lines

Steps:
1. Look up the customer
2. Look up all requested products in one batch
3. Build and validate priced lines (no writes yet)
4. Write the decremented stock
5. Persist the order and its lines

Author: TM3
Date: 2025-10-17
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

from pydantic import ValidationError

from orderdesk.domain.errors import OrderCreationError, OrderError, RepositoryError
from orderdesk.domain.order import Order, OrderCreate, OrderProductRequest
from orderdesk.repositories.interfaces import (
    CustomersRepository,
    OrdersRepository,
    ProductsRepository,
)
from orderdesk.repositories.unit_of_work import PostgresUnitOfWork
from orderdesk.services.order_line_builder import build_order_lines

logger = logging.getLogger(__name__)

ProductRequestInput = Union[OrderProductRequest, dict]


@dataclass
class CreateOrderResult:
    """Outcome of an order placement: either the order or the error"""
    order: Optional[Order] = None
    error: Optional[OrderError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        if self.success:
            return {'success': True, 'order': self.order.to_dict()}
        return {'success': False, 'error': self.error.to_dict()}


class CreateOrderService:
    """
    Service for placing orders against injected stores

    Every failure, business or infrastructure, is reported through
    CreateOrderResult.error; nothing is partially committed by this service
    before validation passes.

    A failure to persist the order after stock was already written is not
    compensated here. It is logged as such; stores that share a transaction
    (PostgresUnitOfWork) roll both writes back.
    """

    def __init__(
        self,
        orders_repository: OrdersRepository,
        products_repository: ProductsRepository,
        customers_repository: CustomersRepository,
    ):
        self.orders_repository = orders_repository
        self.products_repository = products_repository
        self.customers_repository = customers_repository

    def execute(self, customer_id: str, products: Iterable[ProductRequestInput]) -> CreateOrderResult:
        """
        Place an order

        Args:
            customer_id: ID of the ordering customer
            products: Requested lines, as OrderProductRequest or {"id", "quantity"} dicts

        Returns:
            CreateOrderResult with the persisted order, or the first error hit
        """
        try:
            order = self._create(customer_id, products)
        except OrderCreationError as e:
            logger.info(f"Order for customer {customer_id} rejected: {e.error.kind.value}: {e.error.message}")
            return CreateOrderResult(error=e.error)

        logger.info(
            f"Order {order.id} created for customer {customer_id}: "
            f"{order.item_count} lines, total {order.total}"
        )
        return CreateOrderResult(order=order)

    def _create(self, customer_id: str, products: Iterable[ProductRequestInput]) -> Order:
        requests = self._parse_request(customer_id, products)

        customer = self._call("find customer", self.customers_repository.find_by_id, customer_id)
        if customer is None:
            raise OrderCreationError(OrderError.customer_not_found(customer_id))

        # Spell every ID the way the store reports it, so lines for the same
        # product written differently are matched and accumulated together
        requests = [
            request.model_copy(update={'id': self.products_repository.normalize_id(request.id)})
            for request in requests
        ]
        product_ids = list(dict.fromkeys(request.id for request in requests))
        products_db = self._call("find products", self.products_repository.find_all_by_id, product_ids)

        plan = build_order_lines(requests, products_db)

        self._call("update product quantities", self.products_repository.update_quantity, plan.updated_products)

        try:
            return self._call(
                "create order",
                self.orders_repository.create,
                OrderCreate(customer=customer, products=plan.lines),
            )
        except OrderCreationError:
            logger.error(
                f"Stock already decremented for products {list(plan.new_quantities)} "
                f"but order for customer {customer_id} was not persisted; no compensation applied"
            )
            raise

    @staticmethod
    def _parse_request(customer_id: str, products: Iterable[ProductRequestInput]) -> List[OrderProductRequest]:
        if not customer_id:
            raise OrderCreationError(OrderError.invalid_request("customer_id is required"))

        try:
            return [OrderProductRequest.model_validate(product) for product in products]
        except ValidationError as e:
            raise OrderCreationError(OrderError.invalid_request(str(e))) from e

    @staticmethod
    def _call(step: str, func, *args) -> Any:
        try:
            return func(*args)
        except RepositoryError as e:
            logger.error(f"Failed to {step}: {e}")
            raise OrderCreationError(OrderError.infrastructure_failure(step, str(e))) from e


def create_order(
    customer_id: str,
    products: Iterable[ProductRequestInput],
    database_url: Optional[str] = None,
) -> CreateOrderResult:
    """
    Place an order against PostgreSQL in a single transaction

    Product rows are locked while stock is checked, and the stock update and
    order insert are committed together (or not at all).

    Args:
        customer_id: ID of the ordering customer
        products: Requested lines
        database_url: Connection string (defaults to settings.DATABASE_URL)

    Returns:
        CreateOrderResult
    """
    try:
        with PostgresUnitOfWork(database_url) as uow:
            service = CreateOrderService(uow.orders, uow.products, uow.customers)
            result = service.execute(customer_id, products)
            if result.success:
                uow.commit()
            return result
    except RepositoryError as e:
        logger.error(f"Order for customer {customer_id} failed: {e}")
        return CreateOrderResult(error=OrderError.infrastructure_failure("place order", str(e)))
