"""
Order placement errors

OrderError is the structured outcome reported to callers when an order
cannot be placed. The exception classes below are internal signals that
the orchestrator turns into an OrderError; they never reach the caller.

Author: TM3
Date: 2025-10-17
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OrderErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    CUSTOMER_NOT_FOUND = "customer_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    INFRASTRUCTURE_FAILURE = "infrastructure_failure"


class OrderError(BaseModel):
    """
    Structured failure of an order placement

    Fields:
        kind: Which condition triggered the failure
        message: Human-readable description
        customer_id: Customer involved (CUSTOMER_NOT_FOUND)
        product_id: Product involved (PRODUCT_NOT_FOUND, INSUFFICIENT_STOCK)
        product_name: Product name (INSUFFICIENT_STOCK)
        requested: Quantity requested for the failing line
        available: Quantity still available when the line was checked
    """

    kind: OrderErrorKind
    message: str
    customer_id: Optional[str] = None
    product_id: Optional[str] = None
    product_name: Optional[str] = None
    requested: Optional[int] = None
    available: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def shortfall(self) -> Optional[int]:
        """Units missing to satisfy the failing line"""
        if self.requested is None or self.available is None:
            return None
        return self.requested - self.available

    def to_dict(self) -> dict:
        data = self.model_dump(exclude_none=True)
        data['kind'] = self.kind.value
        if self.shortfall is not None:
            data['shortfall'] = self.shortfall
        return data

    # Constructors for each error kind
    @classmethod
    def customer_not_found(cls, customer_id: str) -> "OrderError":
        return cls(
            kind=OrderErrorKind.CUSTOMER_NOT_FOUND,
            message="Customer not found.",
            customer_id=customer_id,
        )

    @classmethod
    def product_not_found(cls, product_id: str) -> "OrderError":
        return cls(
            kind=OrderErrorKind.PRODUCT_NOT_FOUND,
            message=f"Product with id: {product_id}, does not exist",
            product_id=product_id,
        )

    @classmethod
    def insufficient_stock(
        cls, product_id: str, product_name: str, requested: int, available: int
    ) -> "OrderError":
        return cls(
            kind=OrderErrorKind.INSUFFICIENT_STOCK,
            message=f"There is insufficient stock available for the product: {product_name}",
            product_id=product_id,
            product_name=product_name,
            requested=requested,
            available=available,
        )

    @classmethod
    def infrastructure_failure(cls, step: str, detail: str) -> "OrderError":
        return cls(
            kind=OrderErrorKind.INFRASTRUCTURE_FAILURE,
            message=f"Failed to {step}: {detail}",
        )

    @classmethod
    def invalid_request(cls, detail: str) -> "OrderError":
        return cls(kind=OrderErrorKind.INVALID_REQUEST, message=f"Invalid order request: {detail}")


class RepositoryError(Exception):
    """A store could not complete a lookup, update or write"""


class OrderCreationError(Exception):
    """Raised while building an order; carries the OrderError to report"""

    def __init__(self, error: OrderError):
        super().__init__(error.message)
        self.error = error
