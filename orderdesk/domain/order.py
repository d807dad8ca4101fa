"""
Order Domain Models

Represents orders, their priced lines and the request payload used to
place them. Orders are created together with their lines and are never
mutated afterwards.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from orderdesk.domain.customer import Customer


class OrderProductRequest(BaseModel):
    """One requested line: product ID and quantity, supplied by the caller"""

    id: str = Field(..., description="Product ID", min_length=1)
    quantity: int = Field(..., description="Requested quantity", gt=0)

    model_config = ConfigDict(frozen=True)


class OrderLine(BaseModel):
    """
    Order line - a priced product/quantity pair within an order

    The price is copied from the product at order time, so later catalog
    price changes never alter historical orders.

    Fields:
        product_id: Reference to the product
        quantity: Number of units ordered
        price: Unit price captured when the order was placed
    """

    product_id: str = Field(..., description="Product ID")
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    price: Decimal = Field(..., description="Unit price at order time", ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def subtotal(self) -> Decimal:
        """Line total (price x quantity)"""
        return self.price * self.quantity

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['price'] = float(self.price)
        data['subtotal'] = float(self.subtotal)
        return data


class OrderCreate(BaseModel):
    """Schema handed to the order store to persist a new order"""

    customer: Customer
    products: List[OrderLine] = Field(default_factory=list)


class Order(BaseModel):
    """
    Order domain model - a persisted purchase record

    Fields:
        id: Generated order ID
        customer: Customer who placed the order
        products: Ordered sequence of priced lines
        created_at: When the order was created
        updated_at: When the order was last updated
    """

    id: str = Field(..., description="Order ID")
    customer: Customer
    products: List[OrderLine] = Field(default_factory=list, description="Order lines")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True, frozen=True)

    # Computed properties
    @property
    def customer_id(self) -> str:
        return self.customer.id

    @property
    def item_count(self) -> int:
        """Number of lines in the order"""
        return len(self.products)

    @property
    def total_quantity(self) -> int:
        """Total quantity across all lines"""
        return sum(line.quantity for line in self.products)

    @property
    def total(self) -> Decimal:
        """Order total (sum of line subtotals)"""
        return sum((line.subtotal for line in self.products), Decimal('0'))

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = {
            'id': self.id,
            'customer': self.customer.to_dict(),
            'products': [line.to_dict() for line in self.products],
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

        data['item_count'] = self.item_count
        data['total_quantity'] = self.total_quantity
        data['total'] = float(self.total)

        return data
