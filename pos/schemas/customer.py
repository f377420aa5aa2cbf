from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class CustomerBase(BaseModel):
    """Base schema for Customer with common attributes."""
    name: str = Field(..., min_length=1, max_length=255, description="Customer name")
    phone: str = Field("", max_length=64)
    email: str = Field("", max_length=255)
    address: str = Field("", max_length=512)


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(CustomerBase):
    id: int = Field(..., description="ID of the customer to replace")


class CustomerResponse(CustomerBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
