from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional


class TransactionItem(BaseModel):
    """One sold product line."""
    id: int = Field(..., description="Product ID")
    product_name: str = ""
    sku: str = ""
    price: float = 0.0
    quantity: int = Field(..., ge=1)


class TransactionBase(BaseModel):
    """Base schema for Transaction with common attributes."""
    order: int = 0
    ref_number: str = Field("", max_length=64, description="Reference of a held order")
    discount: float = 0.0
    customer: str = Field("0", max_length=64, description="Customer ID, '0' for walk-in")
    customer_name: str = ""
    status: int = Field(0, ge=0, le=1, description="1 = paid, 0 = open")
    subtotal: float = 0.0
    tax: float = 0.0
    order_type: int = 1
    items: list[TransactionItem] = Field(..., description="Sold lines")
    date: Optional[datetime] = None
    payment_type: str = ""
    payment_info: str = ""
    total: float = Field(..., ge=0, description="Amount due")
    paid: float = Field(0.0, ge=0, description="Amount tendered")
    change: float = 0.0
    user_id: int = 0
    user: str = ""
    till: int = 0


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(TransactionBase):
    id: int = Field(..., description="ID of the transaction to replace")


class TransactionResponse(TransactionBase):
    id: int
    date: datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionDeleteRequest(BaseModel):
    order_id: int = Field(..., alias="orderId")

    model_config = ConfigDict(populate_by_name=True)
