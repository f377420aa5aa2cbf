from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Any, Optional, Union


class CamelModel(BaseModel):
    """Purchases are exchanged with camelCase keys (totalAmount, productId, ...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LineItem(CamelModel):
    """
    One product line of a purchase, kept as submitted.

    Values are deliberately loose: a malformed line must not reject the
    whole purchase, it is reported back as a warning instead.
    """
    product_id: Any = Field(None, description="Product to restock")
    product_name: Optional[str] = Field("", description="Display name, not authoritative")
    quantity: Any = Field(None, description="Units received")
    buying_price: Optional[Union[float, str]] = Field(None, description="Unit cost from the supplier")


class PurchaseCreate(CamelModel):
    """Schema for recording a purchase. Required fields are checked by the service."""
    supplier: Optional[str] = Field(None, description="Supplier name (required)")
    items: Optional[list[LineItem]] = Field(None, description="Line items (required, non-empty)")
    total_amount: Optional[float] = Field(None, ge=0, description="Total paid, defaults to 0")
    notes: Optional[str] = Field(None, description="Free-form notes")


class PurchaseResponse(CamelModel):
    """Schema for a stored purchase."""
    id: int
    supplier: str
    items: list[LineItem]
    total_amount: float
    notes: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class PurchaseAddResponse(CamelModel):
    """Result of POST /add: a confirmation message, or warnings for failed stock updates."""
    success: bool
    purchase: PurchaseResponse
    message: Optional[str] = None
    warnings: Optional[list[str]] = None


class PurchaseIdRequest(BaseModel):
    """Body of POST /byId and POST /delete."""
    id: Optional[int] = None


class PurchaseDeleteResponse(BaseModel):
    success: bool
    message: str


class SupplierStats(CamelModel):
    count: int
    total_amount: float


class PurchaseStats(CamelModel):
    """Purchase totals overall and per supplier."""
    total_purchases: int
    total_amount: float
    supplier_stats: dict[str, SupplierStats]
