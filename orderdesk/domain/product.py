"""
Product Domain Model

Represents a sellable product and its available stock.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model - represents a product in the catalog

    Fields:
        id: Product ID (primary key)
        name: Product name
        price: Current unit price
        quantity: Units available for sale (never negative)
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: str = Field(..., description="Product ID", min_length=1)
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price", ge=0)
    quantity: int = Field(..., description="Available stock", ge=0)

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    def with_quantity(self, quantity: int) -> "Product":
        """
        Return a validated copy carrying a new available quantity

        Raises:
            pydantic.ValidationError: If quantity is negative
        """
        return Product.model_validate({**self.model_dump(), 'quantity': quantity})
