"""
Customer Domain Model

Lightweight customer record used by the order placement workflow.
Customers are owned by the customer store and are read-only here.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class Customer(BaseModel):
    """
    Customer domain model

    Only the identifier matters when placing an order; name and email are
    carried along so the persisted order can be rendered without a JOIN.
    """

    id: str = Field(..., description="Customer ID", min_length=1)
    name: str = Field(..., description="Customer name")
    email: Optional[str] = Field(None, description="Customer email")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def to_dict(self) -> dict:
        """Convert to dictionary with datetimes in ISO format"""
        data = self.model_dump()
        for field in ['created_at', 'updated_at']:
            if data.get(field) is not None:
                data[field] = data[field].isoformat()
        return data
